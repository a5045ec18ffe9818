# smartnotes/functions/summarize_note.py
import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse, Response
from fastapi.security import HTTPAuthorizationCredentials

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from smartnotes.functions.llm import CompletionClient, UpstreamError, get_completion_client
from smartnotes.shared.auth import bearer, get_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/functions/v1", tags=["Functions"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "content": {"type": "string", "minLength": 1},
        "title": {"type": ["string", "null"]},
    },
    "required": ["content"],
}
_validator = Draft202012Validator(INPUT_SCHEMA)

def input_problem(body) -> str | None:
    """First schema violation in the request body, or None when it is usable."""
    error = best_match(_validator.iter_errors(body))
    if error is None:
        return None
    path = ".".join(str(p) for p in error.path)
    return f"{path or 'body'}: {error.message}"

def _json(body: dict, status: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status, content=body, headers=CORS_HEADERS)

@router.options("/summarize-note", include_in_schema=False)
def preflight():
    return Response(status_code=200, headers=CORS_HEADERS)

@router.post("/summarize-note", summary="Summarize a note's content with the language model")
async def summarize_note(
    request: Request,
    creds: HTTPAuthorizationCredentials = Depends(bearer),
    llm: CompletionClient = Depends(get_completion_client),
):
    # refusals carry the CORS headers too
    try:
        user = get_user(creds)
    except HTTPException as e:
        return _json({"error": e.detail}, status=e.status_code)

    try:
        body = await request.json()
        problem = input_problem(body)
        if problem:
            logger.info("summarize-note rejected input: %s", problem)
            return _json({"error": "Content is required"}, status=400)

        title = body.get("title")
        logger.info("Summarizing note for %s: %s", user["sub"], title or "Untitled")

        try:
            summary = await llm.summarize(title, body["content"])
        except UpstreamError as e:
            logger.error("completion API error %s: %s", e.status_code, e.body[:500])
            return _json({"error": "Failed to generate summary"}, status=500)

        if not summary:
            return _json({"error": "No summary generated"}, status=500)

        logger.info("Successfully generated summary for: %s", title or "Untitled")
        return _json({"summary": summary})
    except json.JSONDecodeError as e:
        logger.warning("summarize-note got a malformed body: %s", e)
        return _json({"error": f"invalid JSON body: {e}"}, status=500)
    except Exception as e:
        logger.exception("Error in summarize-note function")
        return _json({"error": str(e) or "Internal server error"}, status=500)
