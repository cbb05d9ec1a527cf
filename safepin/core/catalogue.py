# safepin/core/catalogue.py
"""
Location types, the seven safety domains and the display data the map and
list screens need for them (labels, marker colors, education links).
"""
from enum import Enum


class LocationType(str, Enum):
    SCHOOL = "school"
    HOME = "home"
    VILLAGE = "village"


class SafetyCategory(str, Enum):
    DAILY_LIFE = "daily_life"
    TRAFFIC = "traffic"
    FIRST_AID = "first_aid"
    VIOLENCE_PREVENTION = "violence_prevention"
    ADDICTION_PREVENTION = "addiction_prevention"
    DISASTER = "disaster"
    OCCUPATIONAL = "occupational"


class SolutionType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    DRAWING = "drawing"


LOCATION_LABELS: dict[LocationType, str] = {
    LocationType.SCHOOL: "학교",
    LocationType.HOME: "집",
    LocationType.VILLAGE: "마을",
}

# (label, short label, marker color)
CATEGORY_DISPLAY: dict[SafetyCategory, tuple[str, str, str]] = {
    SafetyCategory.DAILY_LIFE: ("생활안전", "생활", "#FF9800"),
    SafetyCategory.TRAFFIC: ("교통안전", "교통", "#E53935"),
    SafetyCategory.FIRST_AID: ("응급처치", "응급처치", "#D81B60"),
    SafetyCategory.VIOLENCE_PREVENTION: ("폭력예방 및 신변보호", "폭력·신변", "#8E24AA"),
    SafetyCategory.ADDICTION_PREVENTION: ("약물 및 사이버 중독 예방", "약물·사이버", "#3949AB"),
    SafetyCategory.DISASTER: ("재난안전", "재난", "#43A047"),
    SafetyCategory.OCCUPATIONAL: ("직업안전", "직업", "#757575"),
}

# Teaching material per category, (title, url). Empty lists are shown as
# "no material yet" by the client.
EDUCATION_LINKS: dict[SafetyCategory, list[tuple[str, str]]] = {
    SafetyCategory.DAILY_LIFE: [
        ("학교안전정보센터 생활안전", "https://www.schoolsafe.kr"),
    ],
    SafetyCategory.TRAFFIC: [
        ("한국도로교통공단 어린이 교통안전", "https://www.koroad.or.kr"),
    ],
    SafetyCategory.FIRST_AID: [],
    SafetyCategory.VIOLENCE_PREVENTION: [],
    SafetyCategory.ADDICTION_PREVENTION: [],
    SafetyCategory.DISASTER: [
        ("국민재난안전포털", "https://www.safekorea.go.kr"),
    ],
    SafetyCategory.OCCUPATIONAL: [],
}
