"""
Stream Chat Custom Command Webhook Receiver

FastAPI router that receives custom command callbacks and hands them to the
matching command handler. No session state: the response body is the whole
result of the interaction step.
"""

import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from commands.ticket import handle_ticket_command
from config import StreamConfig, get_config

from .schemas import CommandRequest
from .security import SignatureVerificationError, verify_signature

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Stream Custom Commands"])


@router.post("/ticket")
async def ticket_command_webhook(
    request: Request,
    config: StreamConfig = Depends(get_config),
) -> JSONResponse:
    """
    Receive a /ticket custom command callback.

    Flow:
    1. Get raw body
    2. Verify signature (401, empty body, if invalid)
    3. Decode into CommandRequest
    4. Run the ticket state machine
    5. Return {"message": ...}

    Raises:
        SignatureVerificationError: Missing or invalid X-Signature (mapped to 401)
        HTTPException(422): Body is not JSON or doesn't match the schema
    """

    # Step 1: Get raw body; the signature covers the exact bytes
    body = await request.body()

    # Step 2: Verify signature (security boundary)
    try:
        await verify_signature(request, body, config)
        logger.debug("Signature verified for ticket command")
    except SignatureVerificationError as e:
        logger.warning(f"Signature verification failed: {e}")
        raise

    # Step 3: Decode
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise HTTPException(
            status_code=422,
            detail="Invalid JSON payload"
        )

    try:
        command_request = CommandRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Rejected ticket command payload: {e.error_count()} validation error(s)")
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False)
        )

    # Step 4: Run the command
    response = handle_ticket_command(command_request)

    # Step 5: Encode
    return JSONResponse(content=response.to_payload())
