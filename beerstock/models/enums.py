import enum


# 맥주 종류
class BeerType(str, enum.Enum):
    LAGER = "LAGER"
    MALZBIER = "MALZBIER"
    WITBIER = "WITBIER"
    WEISS = "WEISS"
    ALE = "ALE"
    IPA = "IPA"
    STOUT = "STOUT"


# 재고 이력 작업 종류
class StockAction(str, enum.Enum):
    CREATE = "CREATE"
    DELETE = "DELETE"
    INCREMENT = "INCREMENT"
    DECREMENT = "DECREMENT"
