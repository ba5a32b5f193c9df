"""
Supabase Adapters

These adapters talk to the hosted Supabase project: the REST API for the
`vehicles` and `bookings` tables and the auth API for admin users.

IMPORTANT: These adapters raise exceptions on failure - NO FALLBACK DATA.
Callers decide whether a failure is shown to the user or absorbed.
"""

import logging
from typing import Any, Dict, List, Optional

from app.adapters.auth_adapter_interface import (
    AuthAdapterInterface,
    AuthServiceError,
    AuthSession,
    InvalidCredentialsError,
)
from app.adapters.store_adapter_interface import (
    DataStoreInterface,
    Row,
    StoreError,
    StoreUnavailableError,
)
from app.models.user import AuthUser
from app.utils.supabase_client import SupabaseClient, SupabaseTransportError, error_message


logger = logging.getLogger(__name__)


def _filter_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def _filter_params(filters: Optional[Dict[str, Any]]) -> Dict[str, str]:
    params = {}
    for column, value in (filters or {}).items():
        operator = "is" if value is None else "eq"
        params[column] = f"{operator}.{_filter_value(value)}"
    return params


# Postgres invalid_text_representation, e.g. a non-UUID string against a uuid column
INVALID_TEXT_REPRESENTATION = "22P02"


def _is_malformed_key(response) -> bool:
    if response.status_code != 400:
        return False
    try:
        body = response.json()
    except ValueError:
        return False
    return isinstance(body, dict) and body.get("code") == INVALID_TEXT_REPRESENTATION


class SupabaseStoreAdapter(DataStoreInterface):
    """
    Table store adapter over the Supabase REST API.
    Raises StoreError on failure - NO FALLBACK DATA.
    """

    RETURN_ROWS = {"Prefer": "return=representation"}

    def __init__(self, client: SupabaseClient):
        self.client = client

    async def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        columns: str = "*",
        order_by: Optional[str] = None,
        descending: bool = False
    ) -> List[Row]:
        params = {"select": columns}
        params.update(_filter_params(filters))
        if order_by:
            params["order"] = f"{order_by}.{'desc' if descending else 'asc'}"

        logger.info(f"SUPABASE SELECT: {table} {filters or {}}")
        return await self._send("GET", table, params=params)

    async def insert(self, table: str, rows: List[Row]) -> List[Row]:
        logger.info(f"SUPABASE INSERT: {table} ({len(rows)} row(s))")
        return await self._send("POST", table, json=rows, headers=self.RETURN_ROWS)

    async def update(
        self,
        table: str,
        values: Row,
        filters: Dict[str, Any]
    ) -> List[Row]:
        logger.info(f"SUPABASE UPDATE: {table} {filters} -> {sorted(values)}")
        return await self._send(
            "PATCH",
            table,
            params=_filter_params(filters),
            json=values,
            headers=self.RETURN_ROWS
        )

    async def delete(self, table: str, filters: Dict[str, Any]) -> List[Row]:
        logger.info(f"SUPABASE DELETE: {table} {filters}")
        return await self._send(
            "DELETE",
            table,
            params=_filter_params(filters),
            headers=self.RETURN_ROWS
        )

    async def _send(self, method: str, table: str, **kwargs) -> List[Row]:
        try:
            response = await self.client.request(method, f"/rest/v1/{table}", **kwargs)
        except SupabaseTransportError as e:
            raise StoreUnavailableError(str(e))

        if not response.is_success:
            message = error_message(response)
            if method != "POST" and _is_malformed_key(response):
                # A value that cannot be cast to the column type matches no row
                logger.info(f"SUPABASE {method} {table}: no rows for malformed filter ({message})")
                return []
            logger.error(f"SUPABASE {method} {table} failed ({response.status_code}): {message}")
            raise StoreError(message, status_code=response.status_code)

        if not response.content:
            return []
        body = response.json()
        return body if isinstance(body, list) else [body]


class SupabaseAuthAdapter(AuthAdapterInterface):
    """
    Auth adapter over the Supabase auth API.
    Sign-in and token checks use the anon key; user creation needs the
    service-role key.
    """

    def __init__(self, client: SupabaseClient, admin_client: Optional[SupabaseClient] = None):
        self.client = client
        self.admin_client = admin_client

    async def sign_in(self, email: str, password: str) -> AuthSession:
        logger.info(f"SUPABASE AUTH: sign-in for {email}")
        try:
            response = await self.client.request(
                "POST",
                "/auth/v1/token",
                params={"grant_type": "password"},
                json={"email": email, "password": password}
            )
        except SupabaseTransportError as e:
            raise AuthServiceError(str(e))

        if response.status_code in (400, 401):
            raise InvalidCredentialsError(error_message(response))
        if not response.is_success:
            raise AuthServiceError(error_message(response), status_code=response.status_code)

        body = response.json()
        return AuthSession(
            access_token=body["access_token"],
            token_type=body.get("token_type", "bearer"),
            user=self._to_user(body["user"])
        )

    async def get_user(self, access_token: str) -> Optional[AuthUser]:
        try:
            response = await self.client.request("GET", "/auth/v1/user", bearer=access_token)
        except SupabaseTransportError as e:
            raise AuthServiceError(str(e))

        if response.status_code in (401, 403):
            return None
        if not response.is_success:
            raise AuthServiceError(error_message(response), status_code=response.status_code)
        return self._to_user(response.json())

    async def create_user(
        self,
        email: str,
        password: str,
        email_confirm: bool = True,
        user_metadata: Optional[Dict[str, Any]] = None
    ) -> AuthUser:
        if self.admin_client is None:
            raise AuthServiceError("Service role key is not configured")

        logger.info(f"SUPABASE AUTH: creating user {email}")
        try:
            response = await self.admin_client.request(
                "POST",
                "/auth/v1/admin/users",
                json={
                    "email": email,
                    "password": password,
                    "email_confirm": email_confirm,
                    "user_metadata": user_metadata or {},
                }
            )
        except SupabaseTransportError as e:
            raise AuthServiceError(str(e))

        if not response.is_success:
            raise AuthServiceError(error_message(response), status_code=response.status_code)

        body = response.json()
        # Older auth servers wrap the created user
        return self._to_user(body.get("user", body))

    def _to_user(self, payload: Dict[str, Any]) -> AuthUser:
        return AuthUser(
            id=str(payload["id"]),
            email=payload.get("email", ""),
            user_metadata=payload.get("user_metadata") or {}
        )
