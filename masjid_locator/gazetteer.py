"""Static gazetteer of UK cities and the masjid areas inside them."""

import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Area:
    """A neighbourhood inside a city, searched within radius_km of its centre."""

    id: str
    name: str
    city_id: str
    latitude: float
    longitude: float
    radius_km: float
    masjid_count: int
    description: Optional[str] = None


@dataclass(frozen=True)
class City:
    id: str
    name: str
    country: str
    latitude: float
    longitude: float
    areas: tuple

    @property
    def total_masjids(self) -> int:
        return sum(area.masjid_count for area in self.areas)


def _city(id, name, country, latitude, longitude, areas):
    return City(
        id=id,
        name=name,
        country=country,
        latitude=latitude,
        longitude=longitude,
        areas=tuple(
            Area(
                id=a[0],
                name=a[1],
                city_id=id,
                latitude=a[2],
                longitude=a[3],
                radius_km=a[4],
                masjid_count=a[5],
                description=a[6],
            )
            for a in areas
        ),
    )


# (id, name, lat, lon, radius_km, masjid_count, description)
CITIES = (
    _city("london", "London", "England", 51.5074, -0.1278, [
        ("central-london", "Central London", 51.5074, -0.1278, 3, 35,
         "Heart of London including Westminster, City of London, Holborn"),
        ("east-london", "East London", 51.5388, -0.0180, 5, 151,
         "Tower Hamlets, Newham, Hackney, Waltham Forest, Whitechapel"),
        ("west-london", "West London", 51.4875, -0.3269, 4, 14,
         "Ealing, Hounslow, Hillingdon, Hammersmith, Southall"),
        ("north-london", "North London", 51.5673, -0.1424, 4, 21,
         "Camden, Islington, Barnet, Enfield, Finsbury Park"),
        ("south-london", "South London", 51.4236, -0.0878, 5, 29,
         "Southwark, Lambeth, Croydon, Merton, Tooting"),
    ]),
    _city("birmingham", "Birmingham", "England", 52.4862, -1.8904, [
        ("birmingham-central", "Birmingham Central", 52.4862, -1.8904, 2, 20,
         "City Centre, Jewellery Quarter, Digbeth"),
        ("small-heath", "Small Heath & Bordesley", 52.4675, -1.8567, 2, 60,
         "Small Heath, Bordesley Green, Alum Rock"),
        ("sparkhill", "Sparkhill & Sparkbrook", 52.4542, -1.8567, 2, 50,
         "Sparkhill, Sparkbrook, Balsall Heath"),
        ("aston", "Aston & Nechells", 52.5067, -1.8567, 2, 14,
         "Aston, Nechells, Lozells"),
        ("handsworth", "Handsworth", 52.5167, -1.9267, 2, 21,
         "Handsworth, Handsworth Wood"),
    ]),
    _city("manchester", "Manchester", "England", 53.4808, -2.2426, [
        ("manchester-central", "Manchester City Centre", 53.4808, -2.2426, 2, 13,
         "City Centre, Northern Quarter, Ancoats"),
        ("longsight", "Longsight & Levenshulme", 53.4467, -2.1967, 2, 18,
         "Longsight, Levenshulme, Gorton"),
        ("cheetham-hill", "Cheetham Hill", 53.5067, -2.2367, 2, 11,
         "Cheetham Hill, Crumpsall"),
        ("rusholme", "Rusholme & Fallowfield", 53.4467, -2.2267, 2, 17,
         "Rusholme, Fallowfield, Moss Side"),
        ("oldham-road", "Oldham Road Area", 53.4967, -2.1867, 3, 3,
         "Oldham Road, Collyhurst, Miles Platting"),
    ]),
    _city("bradford", "Bradford", "England", 53.7960, -1.7594, [
        ("bradford-central", "Bradford City Centre", 53.7960, -1.7594, 2, 54,
         "City Centre, Little Germany"),
        ("manningham", "Manningham", 53.8067, -1.7694, 2, 44,
         "Manningham, Oak Lane"),
        ("girlington", "Girlington & Barkerend", 53.7867, -1.7394, 2, 32,
         "Girlington, Barkerend, Laisterdyke"),
        ("keighley", "Keighley", 53.8671, -1.9069, 3, 8,
         "Keighley town and surrounding areas"),
    ]),
    _city("leicester", "Leicester", "England", 52.6369, -1.1398, [
        ("leicester-central", "Leicester City Centre", 52.6369, -1.1398, 2, 29,
         "City Centre, Cultural Quarter"),
        ("highfields", "Highfields & Spinney Hills", 52.6169, -1.1198, 2, 28,
         "Highfields, Spinney Hills, Stoneygate"),
        ("belgrave", "Belgrave & Rushey Mead", 52.6569, -1.1298, 2, 10,
         "Belgrave, Rushey Mead, Northfields"),
    ]),
    _city("cardiff", "Cardiff", "Wales", 51.4816, -3.1791, [
        ("cardiff-central", "Cardiff City Centre", 51.4816, -3.1791, 2, 20,
         "City Centre, Cardiff Bay, Cathays"),
        ("riverside", "Riverside & Canton", 51.4716, -3.2091, 2, 7,
         "Riverside, Canton, Grangetown"),
        ("roath", "Roath & Plasnewydd", 51.4916, -3.1591, 2, 9,
         "Roath, Plasnewydd, Adamsdown"),
    ]),
    _city("swansea", "Swansea", "Wales", 51.6214, -3.9436, [
        ("swansea-central", "Swansea City Centre", 51.6214, -3.9436, 2, 2,
         "City Centre, Marina, SA1"),
        ("st-thomas", "St Thomas & Port Tennant", 51.6114, -3.9636, 2, 3,
         "St Thomas, Port Tennant, Hafod"),
    ]),
    _city("newport", "Newport", "Wales", 51.5842, -2.9977, [
        ("newport-central", "Newport City Centre", 51.5842, -2.9977, 2, 9,
         "City Centre, Pill, Docks"),
        ("pillgwenlly", "Pillgwenlly & Lliswerry", 51.5742, -2.9777, 2, 9,
         "Pillgwenlly, Lliswerry, Victoria"),
    ]),
    _city("glasgow", "Glasgow", "Scotland", 55.8642, -4.2518, [
        ("glasgow-central", "Glasgow City Centre", 55.8642, -4.2518, 2, 10,
         "City Centre, Merchant City, Calton"),
        ("southside", "Southside Glasgow", 55.8342, -4.2518, 3, 15,
         "Gorbals, Pollokshields, Strathbungo"),
        ("east-end", "East End Glasgow", 55.8542, -4.2118, 3, 3,
         "Dennistoun, Bridgeton, Parkhead"),
    ]),
    _city("edinburgh", "Edinburgh", "Scotland", 55.9533, -3.1883, [
        ("edinburgh-central", "Edinburgh City Centre", 55.9533, -3.1883, 2, 8,
         "Old Town, New Town, Grassmarket"),
        ("leith", "Leith & Pilrig", 55.9733, -3.1683, 2, 4,
         "Leith, Pilrig, Easter Road"),
        ("southside-edinburgh", "Southside Edinburgh", 55.9333, -3.1883, 3, 11,
         "Newington, Marchmont, Bruntsfield"),
    ]),
    _city("dundee", "Dundee", "Scotland", 56.4620, -2.9707, [
        ("dundee-central", "Dundee City Centre", 56.4620, -2.9707, 2, 5,
         "City Centre, Waterfront, West End"),
        ("hilltown", "Hilltown & Stobswell", 56.4720, -2.9607, 2, 4,
         "Hilltown, Stobswell, Lochee"),
    ]),
)


def get_city_by_id(city_id: str) -> Optional[City]:
    for city in CITIES:
        if city.id == city_id:
            return city
    return None


def get_area_by_id(city_id: str, area_id: str) -> Optional[Area]:
    """Look up an area within a specific city. None if either is unknown."""
    city = get_city_by_id(city_id)
    if city is None:
        return None
    for area in city.areas:
        if area.id == area_id:
            return area
    return None


def get_all_city_ids() -> list:
    return [city.id for city in CITIES]


def get_all_area_ids() -> list:
    return [area.id for city in CITIES for area in city.areas]


def format_slug(name: str) -> str:
    """Turn a display name into a URL slug, e.g. 'Small Heath' -> 'small-heath'."""
    slug = re.sub(r"\s+", "-", name.lower())
    return re.sub(r"[^a-z0-9-]", "", slug)
