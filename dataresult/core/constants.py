"""Status codes and canonical error messages.

Values are part of the public contract: error families and the CLI render
them verbatim, so they should remain stable.
"""

from __future__ import annotations

# -----------------------------------------------------------------------------
# File errors
# -----------------------------------------------------------------------------

ERROR_MSG_FILE_NOT_FOUND = "File not found!"
ERROR_MSG_FILE_READ_FAILED = "File read failed!"
ERROR_MSG_FILE_WRITE_FAILED = "File write failed!"

# -----------------------------------------------------------------------------
# Permission errors
# -----------------------------------------------------------------------------

ERROR_MSG_PERMISSION_DENIED = "Permission denied"
ERROR_MSG_PERMISSION_REVOKED = "Permission revoked"

# -----------------------------------------------------------------------------
# Network errors
# -----------------------------------------------------------------------------

ERROR_MSG_BAD_REQUEST = "Bad Request"
ERROR_MSG_UNAUTHORIZED = "Unauthorized"
ERROR_MSG_FORBIDDEN = "Forbidden"
ERROR_MSG_NOT_FOUND = "Not Found"
ERROR_MSG_NO_CONTENT = "No Content"
ERROR_MSG_REQUEST_TIMEOUT = "Request Timeout"
ERROR_MSG_TOO_MANY_REQUESTS = "Too Many Requests"
ERROR_MSG_INTERNAL_SERVER_ERROR = "Internal Server Error"
ERROR_MSG_UNSUPPORTED_MEDIA_TYPE = "Unsupported Media Type"
ERROR_MSG_SERVICE_UNAVAILABLE = "Service Unavailable"

CODE_BAD_REQUEST = 400
CODE_UNAUTHORIZED = 401
CODE_FORBIDDEN = 403
CODE_NOT_FOUND = 404
CODE_NO_CONTENT = 204
CODE_REQUEST_TIMEOUT = 408
CODE_TOO_MANY_REQUESTS = 429
CODE_UNSUPPORTED_MEDIA_TYPE = 415
CODE_INTERNAL_SERVER_ERROR = 500
CODE_SERVICE_UNAVAILABLE = 503

# -----------------------------------------------------------------------------
# Success codes (informational, carried by Success.status_code)
# -----------------------------------------------------------------------------

CODE_SUCCESS_NA = 2**31 - 1
CODE_SUCCESS_OK = 200
CODE_SUCCESS_CREATED = 201
CODE_SUCCESS_ACCEPTED = 202
CODE_SUCCESS_NO_CONTENT = 204

ERROR_MSG_NULL_TRANSFORMATION = "Transformation of Success data returned None"
