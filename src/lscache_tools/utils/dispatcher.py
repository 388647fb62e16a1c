"""Sends purge requests and classifies the answers."""
from __future__ import annotations

import logging

import httpx

from lscache_tools.models.purge_request import PurgeAction, PurgeRequest, PurgeResult
from lscache_tools.models.settings import EnvSettings, env
from lscache_tools.utils.errors import ApplicationError, NetworkError

logger = logging.getLogger(__name__)


class PurgeDispatcher:
    def __init__(
        self,
        client: httpx.Client | None = None,
        settings: EnvSettings = env,
        auth: tuple[str, str] | None = None,
    ):
        """Initializes the dispatcher. Builds a client from settings if none is given."""
        self.settings = settings
        self.client = client or httpx.Client(
            timeout=settings.request_timeout,
            verify=settings.verify_tls,
            auth=auth,
            follow_redirects=True,
        )

    def __enter__(self) -> PurgeDispatcher:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.client.close()

    def query_params(self, request: PurgeRequest) -> dict[str, str]:
        """Wire query parameters for a request."""
        s = self.settings
        data = {s.action_key: request.action.value}
        if not request.via_ajax:
            return data

        data = {"action": s.ajax_action, **data, s.nonce_key: request.nonce}
        if request.action == PurgeAction.PURGE_BY:
            select = request.params["select"]
            data[s.purgeby_select_key] = s.purgeby_codes.get(select, select)
            data[s.purgeby_list_key] = request.params["list"]
        else:
            data.update(request.params)
        return data

    def send(self, request: PurgeRequest) -> PurgeResult:
        """Send a request once. Raises NetworkError or ApplicationError."""
        params = self.query_params(request)
        logger.debug("url is %s", request.url)

        try:
            # a redirected page purge would lose the action key on the next hop
            res = self.client.get(request.url, params=params, follow_redirects=request.via_ajax)
        except httpx.TransportError as e:
            raise NetworkError(request.url, str(e) or type(e).__name__) from e

        logger.debug("%s -> (%s)", res.request.url, res.status_code)

        if not request.via_ajax or self.settings.ack_mode == "status":
            return PurgeResult(
                success=res.is_success,
                status_code=res.status_code,
                message=res.reason_phrase,
            )
        return self.parse_ack(res)

    @staticmethod
    def parse_ack(res: httpx.Response) -> PurgeResult:
        """Read the application-level success flag from a JSON body."""
        try:
            body = res.json()
        except ValueError:
            raise ApplicationError(res.status_code, "response body is not JSON")

        if not isinstance(body, dict) or not isinstance(body.get("success"), bool):
            raise ApplicationError(res.status_code, "response has no boolean 'success'")

        status_code = body.get("status_code", res.status_code)
        if not isinstance(status_code, int) or isinstance(status_code, bool):
            raise ApplicationError(res.status_code, f"invalid status_code {status_code!r}")

        data = body.get("data")
        message = data if isinstance(data, str) else res.reason_phrase
        return PurgeResult(success=body["success"], status_code=status_code, message=message)
