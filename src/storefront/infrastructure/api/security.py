"""Bearer-token authentication for the API.

The token is looked up in the TokenRegistry held on ``app.state``; the
resulting Caller is what the application layer authorizes against.
"""

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront.domain.model.identity import Caller

bearer_scheme = HTTPBearer(auto_error=False)


def current_caller(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Caller:
    if credentials is None:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    caller = request.app.state.tokens.resolve(credentials.credentials)
    if caller is None:
        raise HTTPException(
            status_code=401,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return caller
