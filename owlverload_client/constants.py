"""All magic values live here — no inline literals anywhere else."""

# Endpoints
BARCODE_ENDPOINT = "/api/v1/analyzeBarcode"
IMAGE_ENDPOINT = "/api/v1/analyzeProductImage"

# Request headers
CONTENT_TYPE_JSON = "application/json"
AUTH_SCHEME = "Bearer"

# Response wire names
FIELD_MESSAGE = "message"
FIELD_PAYLOAD = "payload"
FIELD_SUCCESS = "success"
FIELD_USER_EXISTS = "userExists"
FIELD_ANALYSIS = "analysis"
FIELD_IS_NEW_ITEM = "isNewItem"

# Data URLs look like data:image/jpeg;base64,<data>
DATA_URL_SCHEME = "data:"
DATA_URL_SEPARATOR = ","

# Image analysis text blob: one labelled line per field, in this order.
IMAGE_ANALYSIS_LABELS = (
    "1. Product Name:",
    "2. Expiry Date:",
    "3. Ingredients:",
    "4. Alcohol:",
    "5. Halal:",
    "6. Reasoning:",
)

# Default failure messages (used when the server sends none)
MSG_BARCODE_FAILED = "Failed to analyze barcode"
MSG_IMAGE_FAILED = "Failed to analyze product image"

# Validation messages
MSG_EMPTY_BARCODE = "Please enter a barcode"
MSG_EMPTY_IMAGE = "Please select an image"
MSG_EMPTY_TOKEN = "An authentication token is required"
MSG_IMAGE_UNREADABLE = "Could not read image: %s"
MSG_BAD_DATA_URL = "Malformed data URL: missing ',' separator"

# Parse errors
MSG_PARSE_LINE_COUNT = "Expected %d analysis lines, got %d"
MSG_PARSE_LABEL = "Line %d does not start with %r"
MSG_PARSE_MULTILINE = "Field %r must not contain a line break"
MSG_PARSE_NO_ANALYSIS = "Response has no text analysis payload"

# Log messages
MSG_REQUEST_START = "POST %s"
MSG_REQUEST_OK = "✓ %s completed (%d)"
MSG_SERVER_ERROR = "✗ %s failed (%d): %s"
MSG_TRANSPORT_ERROR = "✗ %s transport error: %s"
MSG_DECODE_ERROR = "✗ %s returned an unreadable body (%d): %s"

# CLI
CLI_PROG = "owlverload-scan"
CLI_DESCRIPTION = "Analyze a product by barcode or by photo."
MSG_CLI_NO_TOKEN = "No auth token: pass --token or set OWLVERLOAD_AUTH_TOKEN"
MSG_CLI_ERROR = "Error: %s"
MSG_CLI_UNPARSED = "Could not structure the analysis (%s); raw text follows."
TITLE_BARCODE = "Product Analysis"
TITLE_IMAGE = "Product Scan"
