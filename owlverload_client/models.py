from dataclasses import dataclass, field
from typing import Any

from owlverload_client.constants import (
    FIELD_ANALYSIS,
    FIELD_IS_NEW_ITEM,
    FIELD_MESSAGE,
    FIELD_PAYLOAD,
    FIELD_SUCCESS,
    FIELD_USER_EXISTS,
)


# ── requests ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class BarcodeRequest:
    barcode: str

    def to_body(self) -> dict[str, str]:
        return {"barcode": self.barcode}


@dataclass(frozen=True)
class ImageRequest:
    image: str  # base64, no data-URL prefix

    def to_body(self) -> dict[str, str]:
        return {"image": self.image}


# ── responses ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class AnalysisResponse:
    """Typed view over the server's response envelope."""

    success: bool
    message: str
    payload: Any
    user_exists: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnalysisResponse":
        return cls(
            success=bool(data.get(FIELD_SUCCESS, False)),
            message=data.get(FIELD_MESSAGE) or "",
            payload=data.get(FIELD_PAYLOAD),
            user_exists=bool(data.get(FIELD_USER_EXISTS, False)),
        )


@dataclass(frozen=True)
class ProductName:
    english: str = ""
    korean: str = ""
    japanese: str = ""
    chinese: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "ProductName":
        match data:
            case dict():
                return cls(
                    english=data.get("english", ""),
                    korean=data.get("korean", ""),
                    japanese=data.get("japanese", ""),
                    chinese=data.get("chinese", ""),
                )
            case _:
                return cls()


@dataclass(frozen=True)
class BarcodeAnalysis:
    """Structured barcode analysis. Values are kept exactly as the server sends them."""

    name: ProductName = field(default_factory=ProductName)
    expiry_date: Any = ""
    ingredients_translated: Any = ""
    contains_alcohol: Any = ""
    halal_status: Any = ""
    reasoning: Any = ""
    is_new_item: bool = False

    @classmethod
    def from_payload(cls, payload: dict[str, Any] | None) -> "BarcodeAnalysis":
        match payload:
            case dict():
                pass
            case _:
                payload = {}
        match payload.get(FIELD_ANALYSIS):
            case dict() as analysis:
                pass
            case _:
                analysis = {}
        return cls(
            name=ProductName.from_dict(analysis.get("name")),
            expiry_date=analysis.get("expiry_date", ""),
            ingredients_translated=analysis.get("ingredients_translated", ""),
            contains_alcohol=analysis.get("contains_alcohol", ""),
            halal_status=analysis.get("halal_status", ""),
            reasoning=analysis.get("reasoning", ""),
            is_new_item=bool(payload.get(FIELD_IS_NEW_ITEM, False)),
        )


@dataclass(frozen=True)
class ProductImageAnalysis:
    product_name: str
    expiry_date: str
    ingredients: str
    alcohol: str
    halal: str
    reasoning: str
