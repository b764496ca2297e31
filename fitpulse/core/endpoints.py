from typing import Optional

FITBIT_API_BASE = "https://api.fitbit.com"
FITBIT_TOKEN_URL = f"{FITBIT_API_BASE}/oauth2/token"
DEFAULT_USER_ID = "-"


def heart_rate_url(user_id: Optional[str] = None) -> str:
    user = user_id or DEFAULT_USER_ID
    return f"{FITBIT_API_BASE}/1/user/{user}/activities/heart/date/today/1d/1min.json"
