"""
Response schema of the appdetails endpoint.

The endpoint answers with a JSON object keyed by appid (as a string). Each
value carries a success flag and, when successful, a large ``data`` document.
The models below only describe that shape; nothing in the fetcher inspects
the payload.
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    StrictFloat,
    StrictInt,
    TypeAdapter,
    field_validator,
    model_validator,
)


class JsonNumber(RootModel[Union[StrictInt, StrictFloat, str]]):
    """
    A value the API sends either as a JSON number or as a string.

    Steam is inconsistent about ids, prices and scores (``"price": 999`` on one
    app, ``"price": "999"`` on another), so these fields accept both.
    """

    @property
    def value(self) -> str:
        """
        Textual form of the value.

        Strings are returned unchanged. Numbers are already parsed by the JSON
        decoder, so they come back in Python's canonical form (``19.90`` is
        ``"19.9"``).
        """
        return str(self.root)

    def __int__(self) -> int:
        return int(Decimal(self.value))

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return self.value


class StoreModel(BaseModel):
    """
    Base for all schema records.

    Unknown keys are ignored and JSON nulls fall back to the field default.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: v for k, v in value.items() if v is not None}
        return value


class Requirements(StoreModel):
    minimum: str = ""
    recommended: str = ""


class PackageSub(StoreModel):
    packageid: Optional[JsonNumber] = None
    percent_savings_text: str = ""
    percent_savings: Optional[JsonNumber] = None
    option_text: str = ""
    option_description: str = ""
    can_get_free_license: Optional[JsonNumber] = None
    is_free_license: bool = False
    price_in_cents_with_discount: Optional[JsonNumber] = None


class PackageGroup(StoreModel):
    name: str = ""
    title: str = ""
    description: str = ""
    selection_text: str = ""
    save_text: str = ""
    display_type: Optional[JsonNumber] = None
    is_recurring_subscription: str = ""
    subs: List[PackageSub] = Field(default_factory=list)


class Platforms(StoreModel):
    windows: bool = False
    mac: bool = False
    linux: bool = False


class Metacritic(StoreModel):
    score: Optional[JsonNumber] = None
    url: str = ""


class Category(StoreModel):
    id: Optional[JsonNumber] = None
    description: str = ""


class Genre(StoreModel):
    id: Optional[JsonNumber] = None
    description: str = ""


class Screenshot(StoreModel):
    id: Optional[JsonNumber] = None
    path_thumbnail: str = ""
    path_full: str = ""


class Movie(StoreModel):
    id: Optional[JsonNumber] = None
    name: str = ""
    thumbnail: str = ""
    webm: Dict[str, str] = Field(default_factory=dict)
    mp4: Dict[str, str] = Field(default_factory=dict)
    highlight: bool = False


class Recommendations(StoreModel):
    total: Optional[JsonNumber] = None


class Achievement(StoreModel):
    name: str = ""
    path: str = ""


class Achievements(StoreModel):
    total: Optional[JsonNumber] = None
    highlighted: List[Achievement] = Field(default_factory=list)


class ReleaseDate(StoreModel):
    coming_soon: bool = False
    date: str = ""


class SupportInfo(StoreModel):
    url: str = ""
    email: str = ""


class PriceOverview(StoreModel):
    currency: str = ""
    initial: Optional[JsonNumber] = None
    final: Optional[JsonNumber] = None
    discount_percent: Optional[JsonNumber] = None
    initial_formatted: str = ""
    final_formatted: str = ""


class AppData(StoreModel):
    """Store page data of a single app."""

    type: str = ""
    name: str = ""
    steam_appid: Optional[JsonNumber] = None
    required_age: Optional[JsonNumber] = None
    is_free: bool = False
    dlc: List[JsonNumber] = Field(default_factory=list)
    detailed_description: str = ""
    about_the_game: str = ""
    short_description: str = ""
    supported_languages: str = ""
    reviews: str = ""
    header_image: str = ""
    background: str = ""
    website: Optional[str] = None
    legal_notice: str = ""
    pc_requirements: Requirements = Field(default_factory=Requirements)
    mac_requirements: Requirements = Field(default_factory=Requirements)
    linux_requirements: Requirements = Field(default_factory=Requirements)
    developers: List[str] = Field(default_factory=list)
    publishers: List[str] = Field(default_factory=list)
    packages: List[JsonNumber] = Field(default_factory=list)
    package_groups: List[PackageGroup] = Field(default_factory=list)
    platforms: Platforms = Field(default_factory=Platforms)
    metacritic: Metacritic = Field(default_factory=Metacritic)
    categories: List[Category] = Field(default_factory=list)
    genres: List[Genre] = Field(default_factory=list)
    screenshots: List[Screenshot] = Field(default_factory=list)
    movies: List[Movie] = Field(default_factory=list)
    recommendations: Recommendations = Field(default_factory=Recommendations)
    achievements: Achievements = Field(default_factory=Achievements)
    release_date: ReleaseDate = Field(default_factory=ReleaseDate)
    support_info: SupportInfo = Field(default_factory=SupportInfo)
    price_overview: PriceOverview = Field(default_factory=PriceOverview)

    @field_validator(
        "pc_requirements",
        "mac_requirements",
        "linux_requirements",
        mode="before",
    )
    @classmethod
    def _empty_requirements(cls, value: Any) -> Any:
        # Steam sends [] instead of an object when an app lists no requirements
        if isinstance(value, list) or value is None:
            return {}
        return value


class AppResponse(StoreModel):
    """
    Entry of the response map for one appid.

    ``data`` stays at its defaults when ``success`` is false.
    """

    success: bool
    data: AppData = Field(default_factory=AppData)

    @field_validator("data", mode="before")
    @classmethod
    def _missing_data(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return {}
        return value


# Keyed by the appid as a string, the way the API returns it
StoreResponse = Dict[str, AppResponse]

_store_response_adapter = TypeAdapter(StoreResponse)


def decode_store_response(payload: Any) -> StoreResponse:
    """
    Validate a decoded JSON body into a StoreResponse.

    Raises:
        pydantic.ValidationError: If the body does not have the expected shape
    """
    return _store_response_adapter.validate_python(payload)
