# safepin/schemas/catalogue.py
from pydantic import BaseModel


class EducationLink(BaseModel):
    title: str
    url: str


class CategoryPublic(BaseModel):
    value: str
    label: str
    short_label: str
    color: str
    education_links: list[EducationLink]


class CategoryList(BaseModel):
    categories: list[CategoryPublic]


class LocationTypePublic(BaseModel):
    value: str
    label: str


class LocationTypeList(BaseModel):
    location_types: list[LocationTypePublic]
