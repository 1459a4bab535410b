"""ImageAnalysisClient — POST /api/v1/analyzeProductImage."""
from typing import Any

from owlverload_client.analysis.client import AnalysisClient
from owlverload_client.constants import IMAGE_ENDPOINT, MSG_IMAGE_FAILED
from owlverload_client.encoding import ImageSource, to_base64
from owlverload_client.models import ImageRequest


class ImageAnalysisClient(AnalysisClient):

    async def analyze(self, image: ImageSource, auth_token: str) -> dict[str, Any]:
        """Encode ``image`` and send it.

        The returned ``payload.analysis`` is a six-line text blob; use
        ``owlverload_client.parsing.parse_image_response`` to structure it.
        """
        request = ImageRequest(await to_base64(image))
        return await self._post(IMAGE_ENDPOINT, request.to_body(), auth_token, MSG_IMAGE_FAILED)
