"""
1Password item models.

Shapes follow the ``op item get --format json`` template:
https://developer.1password.com/docs/cli/item-template-json/

Every model keeps attributes it does not declare (``extra="allow"``) and the
wire dump skips keys that were absent on input, so an item read from the
vault is written back with only the fields we touched changed.
"""

from __future__ import annotations

import json
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class FieldType(StrEnum):
    """Field types from https://developer.1password.com/docs/cli/item-fields/"""

    CONCEALED = "CONCEALED"  # a concealed password
    STRING = "STRING"
    EMAIL = "EMAIL"
    URL = "URL"
    DATE = "DATE"  # YYYY-MM-DD
    MONTH_YEAR = "MONTH_YEAR"  # YYYYMM or YYYY/MM
    PHONE = "PHONE"
    OTP = "OTP"  # otpauth:// URI
    MENU = "MENU"  # undocumented, e.g. the "type" field of API Credential items
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, raw: str) -> FieldType:
        try:
            return cls(raw)
        except ValueError:
            return cls.UNKNOWN

    def assignment_type(self) -> str:
        """The ``fieldType`` used in ``op`` assignment statements."""
        if self is FieldType.UNKNOWN:
            raise ValueError("unrecognized field type has no assignment type")
        return _ASSIGNMENT_TYPES[self]


# Only usable in assignment statements; takes a path to a file.
FILE_ASSIGNMENT_TYPE = "file"

_ASSIGNMENT_TYPES: dict[FieldType, str] = {
    FieldType.CONCEALED: "password",
    FieldType.STRING: "text",
    FieldType.EMAIL: "email",
    FieldType.URL: "url",
    FieldType.DATE: "date",
    FieldType.MONTH_YEAR: "monthYear",
    FieldType.PHONE: "phone",
    FieldType.OTP: "otp",
    FieldType.MENU: "menu",
}


class _Passthrough(BaseModel):
    model_config = ConfigDict(extra="allow")


class VaultItemSummary(BaseModel):
    """One entry of ``op item list``. Only used for matching."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str


class ItemSection(_Passthrough):
    id: str
    label: str | None = None


class FieldSectionRef(_Passthrough):
    """The ``section`` object attached to a field."""

    id: str


class VaultField(_Passthrough):
    # Built-in fields of a category reuse well-known ids such as "credential".
    id: str
    section: FieldSectionRef | None = None
    type: str
    label: str | None = None
    value: str | None = None
    reference: str = ""

    @property
    def field_type(self) -> FieldType:
        return FieldType.parse(self.type)

    @property
    def display_name(self) -> str:
        return self.label if self.label else self.id


class VaultItem(_Passthrough):
    id: str
    title: str
    category: str
    sections: list[ItemSection] | None = None
    fields: list[VaultField] | None = None

    def __str__(self) -> str:
        return f"{self.title} (id: {self.id})"

    def get_field(self, field_id: str) -> VaultField | None:
        for f in self.fields or []:
            if f.id == field_id:
                return f
        return None

    def to_wire(self) -> bytes:
        """Serialize to compact JSON for ``op item edit``.

        Declared keys come first in model order, followed by passthrough keys
        in the order they were read. Keys that were absent on input stay absent.
        """
        data = self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return json.dumps(data, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
