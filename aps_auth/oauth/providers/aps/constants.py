PROVIDER_NAME = "aps"

AUTH_URL = "https://developer.api.autodesk.com/authentication/v2/authorize"
TOKEN_URL = "https://developer.api.autodesk.com/authentication/v2/token"
USERINFO_URL = "https://api.userprofile.autodesk.com/userinfo"
