"""
Constantes globales pour Alamo Movies.

Ce module contient :
- Les marches (villes) Alamo Drafthouse
- Le catalogue de reference des cinemas connus, utilise par
  `alamo cinema` (sans --local) et `alamo get-all`
"""

from alamo_movies.core.entities.cinema import Cinema, Market

# Marches Alamo Drafthouse
AUSTIN = Market(id="0000", name="Austin", slug="austin")
HOUSTON = Market(id="0100", name="Houston", slug="houston")
SAN_ANTONIO = Market(id="0300", name="San Antonio", slug="san-antonio")
DFW = Market(id="0400", name="DFW", slug="dfw")
WINCHESTER = Market(id="0500", name="Winchester", slug="winchester")
NEW_YORK = Market(id="0600", name="New York", slug="nyc")
KANSAS_CITY = Market(id="1000", name="Kansas City", slug="kansas-city")
DENVER = Market(id="1100", name="Denver", slug="denver")
PHOENIX = Market(id="1300", name="Phoenix", slug="phoenix")
RALEIGH = Market(id="1800", name="Raleigh", slug="raleigh")
SAN_FRANCISCO = Market(id="2000", name="San Francisco", slug="sf")
LOS_ANGELES = Market(id="2100", name="Los Angeles", slug="los-angeles")

# Catalogue de reference (identifiant normalise sur 4 chiffres)
KNOWN_CINEMAS: tuple[Cinema, ...] = (
    Cinema(id="0001", name="Ritz", slug="ritz", market=AUSTIN),
    Cinema(id="0002", name="Village", slug="village", market=AUSTIN),
    Cinema(id="0003", name="South Lamar", slug="south-lamar", market=AUSTIN),
    Cinema(id="0004", name="Lakeline", slug="lakeline", market=AUSTIN),
    Cinema(id="0006", name="Slaughter Lane", slug="slaughter-lane", market=AUSTIN),
    Cinema(id="0007", name="Mueller", slug="mueller", market=AUSTIN),
    Cinema(id="0101", name="Mason Park", slug="mason-park", market=HOUSTON),
    Cinema(id="0102", name="Vintage Park", slug="vintage-park", market=HOUSTON),
    Cinema(id="0103", name="West Oaks", slug="west-oaks", market=HOUSTON),
    Cinema(id="0104", name="LaCenterra", slug="lacenterra", market=HOUSTON),
    Cinema(id="0301", name="Park North", slug="park-north", market=SAN_ANTONIO),
    Cinema(id="0302", name="Westlakes", slug="westlakes", market=SAN_ANTONIO),
    Cinema(id="0303", name="Stone Oak", slug="stone-oak", market=SAN_ANTONIO),
    Cinema(id="0401", name="Richardson", slug="richardson", market=DFW),
    Cinema(id="0402", name="Denton", slug="denton", market=DFW),
    Cinema(id="0403", name="Cedars", slug="cedars", market=DFW),
    Cinema(id="0501", name="Winchester", slug="winchester", market=WINCHESTER),
    Cinema(id="0601", name="Yonkers", slug="yonkers", market=NEW_YORK),
    Cinema(id="0602", name="Brooklyn", slug="brooklyn", market=NEW_YORK),
    Cinema(id="1001", name="Mainstreet", slug="mainstreet", market=KANSAS_CITY),
    Cinema(id="1002", name="North Kansas City", slug="north-kansas-city", market=KANSAS_CITY),
    Cinema(id="1101", name="Littleton", slug="littleton", market=DENVER),
    Cinema(id="1102", name="Sloan's Lake", slug="sloans-lake", market=DENVER),
    Cinema(id="1301", name="Chandler", slug="chandler", market=PHOENIX),
    Cinema(id="1302", name="Tempe", slug="tempe", market=PHOENIX),
    Cinema(id="1801", name="Raleigh", slug="raleigh", market=RALEIGH),
    Cinema(id="2001", name="New Mission", slug="new-mission", market=SAN_FRANCISCO),
    Cinema(id="2101", name="Downtown LA", slug="downtown-la", market=LOS_ANGELES),
)
