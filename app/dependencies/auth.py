from fastapi import HTTPException, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.config import ACCESS_TOKEN

security = HTTPBearer(auto_error=False)


def verify_token(credentials: HTTPAuthorizationCredentials | None = Depends(security)):
    # open when no token is configured
    if not ACCESS_TOKEN:
        return None
    if credentials is None or credentials.credentials != ACCESS_TOKEN:
        raise HTTPException(status_code=401, detail="Invalid token")
    return credentials.credentials
