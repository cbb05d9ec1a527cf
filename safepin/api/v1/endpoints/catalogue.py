# safepin/api/v1/endpoints/catalogue.py
from fastapi import APIRouter

from safepin.core.catalogue import (
    CATEGORY_DISPLAY,
    EDUCATION_LINKS,
    LOCATION_LABELS,
    LocationType,
    SafetyCategory,
)
from safepin.schemas.catalogue import (
    CategoryList,
    CategoryPublic,
    EducationLink,
    LocationTypeList,
    LocationTypePublic,
)

router = APIRouter(tags=["catalogue"])


@router.get("/categories", response_model=CategoryList)
def list_categories():
    categories = []
    for category in SafetyCategory:
        label, short_label, color = CATEGORY_DISPLAY[category]
        categories.append(
            CategoryPublic(
                value=category.value,
                label=label,
                short_label=short_label,
                color=color,
                education_links=[
                    EducationLink(title=title, url=url)
                    for title, url in EDUCATION_LINKS.get(category, [])
                ],
            )
        )
    return CategoryList(categories=categories)


@router.get("/location-types", response_model=LocationTypeList)
def list_location_types():
    return LocationTypeList(
        location_types=[
            LocationTypePublic(value=lt.value, label=LOCATION_LABELS[lt])
            for lt in LocationType
        ]
    )
