import enum


class AttributeKey(str, enum.Enum):
    PRICE = "price"
    QUALITY = "quality"
    DELIVERY_TIME = "deliveryTime"
    PAYMENT_TERMS = "paymentTerms"
    CARBON_FOOTPRINT = "carbonFootprint"
    INCOTERMS = "incoterms"


class AttributeDirection(str, enum.Enum):
    MAXIMIZE = "maximize"
    MINIMIZE = "minimize"


class Region(str, enum.Enum):
    GLOBAL = "GLOBAL"
    US = "US"
    EU = "EU"
    APAC = "APAC"


class SuggestionTier(str, enum.Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    POOR = "Poor"
