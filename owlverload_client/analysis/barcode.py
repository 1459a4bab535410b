"""BarcodeAnalysisClient — POST /api/v1/analyzeBarcode."""
from typing import Any

from owlverload_client.analysis.client import AnalysisClient
from owlverload_client.constants import BARCODE_ENDPOINT, MSG_BARCODE_FAILED, MSG_EMPTY_BARCODE
from owlverload_client.errors import ValidationError
from owlverload_client.models import BarcodeRequest


class BarcodeAnalysisClient(AnalysisClient):

    async def analyze(self, barcode: str, auth_token: str) -> dict[str, Any]:
        match barcode:
            case str() if barcode.strip():
                pass
            case _:
                raise ValidationError(MSG_EMPTY_BARCODE)
        request = BarcodeRequest(barcode)
        return await self._post(BARCODE_ENDPOINT, request.to_body(), auth_token, MSG_BARCODE_FAILED)
