"""Common mock API responses: OAuth, errors."""

TOKEN_RESPONSE = {
    "access_token": "1000.test-access-token",
    "scope": "ZohoBooks.fullaccess.all",
    "api_domain": "https://www.zohoapis.com",
    "token_type": "Bearer",
    "expires_in": 3600,
}

TOKEN_ERROR_RESPONSE = {"error": "invalid_client"}

ERROR_AUTH_401 = {"code": 57, "message": "You are not authorized to perform this operation"}

ERROR_VALIDATION_400 = {"code": 4, "message": "Invalid value passed for contact_name"}

DELETED_RESPONSE = {"code": 0, "message": "The record has been deleted."}
