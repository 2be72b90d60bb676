from typing import Any, Dict, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator


_FALSY_FLAGS = {"", "0", "false", "no", "off"}


def _aliases(*names: str) -> AliasChoices:
    return AliasChoices(*names)


class CanonicalQuery(BaseModel):
    """
    Caller-facing search criteria shared by every provider.

    All fields are optional; which subset is required depends on the provider
    and mode. Each field accepts the spellings callers already use (camelCase
    query parameters, snake_case identifiers and the identity-match body keys).
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    # Person
    first_name: Optional[str] = Field(None, validation_alias=_aliases("firstName", "first_name", "given_name"))
    middle_name: Optional[str] = Field(None, validation_alias=_aliases("middleName", "middle_name"))
    last_name: Optional[str] = Field(None, validation_alias=_aliases("lastName", "last_name", "family_name"))
    name: Optional[str] = None
    dob: Optional[str] = None
    age: Optional[str] = None

    # Contact
    phone: Optional[str] = None
    email: Optional[str] = None

    # Address
    address_line1: Optional[str] = Field(None, validation_alias=_aliases("addressLine1", "address_line1"))
    address_line2: Optional[str] = Field(None, validation_alias=_aliases("addressLine2", "address_line2"))
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = Field(None, validation_alias=_aliases("zip", "postal_code", "postalCode", "zipCode"))

    # Identifiers
    profile_id: Optional[str] = Field(None, validation_alias=_aliases("profileId", "profile_id", "profile"))
    company: Optional[str] = None
    location: Optional[str] = None
    locality: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None
    school: Optional[str] = None
    lid: Optional[str] = None

    # Provider-specific extras
    page: Optional[str] = None
    results_per_page: Optional[str] = Field(None, validation_alias=_aliases("resultsPerPage", "results_per_page"))
    size: Optional[str] = None
    action: Optional[str] = None
    query: Optional[Any] = Field(None, description="Raw search DSL (mapping or JSON string)")
    sql: Optional[str] = None
    api_key: Optional[str] = Field(None, validation_alias=_aliases("apiKey", "api_key"))
    phone_format: Optional[str] = Field(None, validation_alias=_aliases("phoneFormat", "phone_format"))
    debug: bool = Field(False, validation_alias=_aliases("_debug", "debug"))

    @field_validator("*", mode="before")
    @classmethod
    def _clean_value(cls, value: Any, info: ValidationInfo) -> Any:
        if info.field_name == "debug":
            if isinstance(value, str):
                return value.strip().lower() not in _FALSY_FLAGS
            return bool(value)
        if info.field_name == "query":
            if isinstance(value, str) and not value.strip():
                return None
            return value or None
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> "CanonicalQuery":
        """Build a query from request parameters or a decoded body."""
        return cls.model_validate(dict(mapping or {}))

    def criteria(self) -> Dict[str, Any]:
        """Present fields only, keyed by canonical name (for logs and debug echoes)."""
        return self.model_dump(exclude_none=True, exclude={"api_key", "debug"})
