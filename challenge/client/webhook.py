import logging

import requests
from requests.exceptions import HTTPError, RequestException
from pydantic import ValidationError

from challenge.api.schemas.webhook import (
    SolutionRequest,
    WebhookRequest,
    WebhookResponse,
)
from challenge.config.settings import settings
from challenge.errors import DeserializationError, NetworkError

logger = logging.getLogger("challenge.client")


def _post_json(url: str, body: dict, headers: dict) -> requests.Response:
    try:
        response = requests.post(
            url,
            json=body,
            headers=headers,
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
    except HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        raise NetworkError(f"POST {url} returned HTTP {status}", url, status) from e
    except RequestException as e:
        raise NetworkError(f"POST {url} failed: {e}", url) from e
    # Header values come from the server; http.client only accepts latin-1
    except (UnicodeError, ValueError) as e:
        raise NetworkError(f"POST {url} could not be sent: {e}", url) from e

    return response


def generate_webhook(payload: WebhookRequest | None = None) -> WebhookResponse:
    """
    Register the candidate and get back the webhook URL plus access token.
    Raises NetworkError or DeserializationError; nothing is retried.
    """

    url = settings.WEBHOOK_GENERATE_URL
    payload = payload or WebhookRequest.from_settings(settings)

    logger.info("Generating webhook...")

    response = _post_json(
        url,
        payload.model_dump(),
        {"Content-Type": "application/json"},
    )

    try:
        data = response.json()
    except ValueError as e:
        raise DeserializationError(
            f"Webhook reply from {url} is not JSON", url, response.text
        ) from e

    if data is None:
        raise DeserializationError(f"Webhook reply from {url} is empty", url, response.text)

    try:
        result = WebhookResponse.model_validate(data)
    except ValidationError as e:
        raise DeserializationError(
            f"Webhook reply from {url} has unexpected shape", url, response.text
        ) from e

    logger.info(f"✅ Webhook generated. URL: {result.webhook}")
    return result


def resolve_submit_url(webhook_url: str) -> str:
    if settings.SUBMIT_TO_RETURNED_WEBHOOK and webhook_url:
        return webhook_url
    return settings.WEBHOOK_SUBMIT_URL


def submit_solution(webhook_url: str, access_token: str, answer: str) -> str:
    url = resolve_submit_url(webhook_url)

    logger.info(f"Submitting solution to {url}")

    # Token goes out verbatim, no "Bearer " prefix
    headers = {
        "Content-Type": "application/json",
        "Authorization": access_token,
    }

    response = _post_json(
        url,
        SolutionRequest(finalQuery=answer).model_dump(),
        headers,
    )

    logger.info(f"✅ Solution submitted. Response: {response.text}")
    return response.text
