from enum import Enum
from typing import Dict, List

from pydantic import BaseModel


class WorldRegion(str, Enum):
    AFRICAN = "african"
    ASIAN = "asian"
    EUROPEAN = "european"
    LATIN_AMERICAN = "latin-american"
    MIDDLE_EASTERN = "middle-eastern"
    SOUTHERN = "southern"
    SOUL_FOOD = "soul-food"
    CAJUN_CREOLE = "cajun-creole"
    TEX_MEX = "tex-mex"
    BBQ = "bbq"
    NEW_ENGLAND = "new-england"
    MIDWEST = "midwest"
    OCEANIAN = "oceanian"
    CARIBBEAN = "caribbean"


ALL_REGIONS = "all"


class RegionInfo(BaseModel):
    id: WorldRegion
    name: str
    flag: str
    cuisines: List[str]
    description: str


WORLD_REGIONS: List[RegionInfo] = [
    RegionInfo(id=WorldRegion.AFRICAN, name="African", flag="🌍",
               cuisines=["Ethiopian", "Moroccan", "Nigerian", "South African", "Egyptian"],
               description="Rich, flavorful dishes with bold spices and unique ingredients"),
    RegionInfo(id=WorldRegion.ASIAN, name="Asian", flag="🌏",
               cuisines=["Chinese", "Japanese", "Korean", "Thai", "Vietnamese", "Indian"],
               description="Diverse flavors from stir-fries to curries to sushi"),
    RegionInfo(id=WorldRegion.EUROPEAN, name="European", flag="🇪🇺",
               cuisines=["Italian", "French", "Spanish", "Greek", "German", "British"],
               description="Classic techniques and refined flavors"),
    RegionInfo(id=WorldRegion.LATIN_AMERICAN, name="Latin American", flag="🌎",
               cuisines=["Mexican", "Brazilian", "Peruvian", "Argentinian", "Colombian"],
               description="Vibrant, colorful dishes with fresh ingredients"),
    RegionInfo(id=WorldRegion.MIDDLE_EASTERN, name="Middle Eastern", flag="🕌",
               cuisines=["Lebanese", "Turkish", "Persian", "Israeli", "Syrian"],
               description="Aromatic spices, grilled meats, and mezze spreads"),
    RegionInfo(id=WorldRegion.SOUTHERN, name="Southern", flag="🍗",
               cuisines=["Southern Comfort", "Georgia", "Tennessee", "Alabama", "Mississippi"],
               description="Fried chicken, biscuits, gravy, and comfort classics"),
    RegionInfo(id=WorldRegion.SOUL_FOOD, name="Soul Food", flag="🥘",
               cuisines=["African-American", "Traditional Soul", "Modern Soul", "Sunday Dinner"],
               description="Rich, hearty dishes with deep cultural roots"),
    RegionInfo(id=WorldRegion.CAJUN_CREOLE, name="Cajun & Creole", flag="🦐",
               cuisines=["Louisiana", "New Orleans", "Cajun", "Creole", "Bayou"],
               description="Bold spices, gumbo, jambalaya, and étouffée"),
    RegionInfo(id=WorldRegion.TEX_MEX, name="Tex-Mex", flag="🌮",
               cuisines=["Texas-Mexican", "Southwestern", "Border", "Chili", "Fajitas"],
               description="Tacos, enchiladas, queso, and Texan-Mexican fusion"),
    RegionInfo(id=WorldRegion.BBQ, name="BBQ", flag="🍖",
               cuisines=["Texas BBQ", "Kansas City", "Carolina", "Memphis", "Smoker"],
               description="Smoked meats, ribs, brisket, and tangy sauces"),
    RegionInfo(id=WorldRegion.NEW_ENGLAND, name="New England", flag="🦞",
               cuisines=["Massachusetts", "Maine", "Connecticut", "Rhode Island", "Vermont"],
               description="Clam chowder, lobster rolls, and coastal favorites"),
    RegionInfo(id=WorldRegion.MIDWEST, name="Midwest", flag="🌾",
               cuisines=["Chicago", "Wisconsin", "Minnesota", "Ohio", "Farm-to-Table"],
               description="Hearty casseroles, cheese curds, and comfort classics"),
    RegionInfo(id=WorldRegion.OCEANIAN, name="Oceanian", flag="🌊",
               cuisines=["Australian", "Polynesian", "Hawaiian", "New Zealand"],
               description="Fresh seafood and tropical flavors"),
    RegionInfo(id=WorldRegion.CARIBBEAN, name="Caribbean", flag="🏝️",
               cuisines=["Jamaican", "Cuban", "Puerto Rican", "Trinidadian", "Haitian"],
               description="Island flavors with tropical fruits and spices"),
]

REGIONS_BY_ID: Dict[str, RegionInfo] = {region.id.value: region for region in WORLD_REGIONS}
