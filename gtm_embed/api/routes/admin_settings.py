"""
Admin Settings API - Google Tag Manager container ID.

Provides GET/PUT endpoints for the container ID and the HTML settings field.

Key behaviors:
- GET returns the stored ID ("" when unset)
- PUT validates the submission; on rejection responds 400 with the message
  and keeps the previous value
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from gtm_embed.adapters.settings_errors import SettingsErrorEntry, SettingsErrors
from gtm_embed.api.deps import get_settings_errors, get_settings_service, require_admin
from gtm_embed.components.emission import escape_attr
from gtm_embed.components.gtm_settings import GtmSettingsService
from gtm_embed.domain.entities import CONTAINER_ID_FORMAT, CONTAINER_ID_OPTION

router = APIRouter(dependencies=[Depends(require_admin)])

FIELD_ID = "required-gtm-container-id"


# --- Request/Response Models ---


class ContainerIdResponse(BaseModel):
    """Stored container ID."""

    container_id: str


class ContainerIdUpdateRequest(BaseModel):
    """Submitted container ID."""

    container_id: str | None = None


class ValidationErrorResponse(BaseModel):
    """Validation error response."""

    field: str
    code: str
    message: str


class ErrorResponse(BaseModel):
    """Error response with validation errors."""

    detail: dict[str, Any]


# --- Helper Functions ---


def settings_errors_to_response(
    entries: list[SettingsErrorEntry],
) -> list[ValidationErrorResponse]:
    """Convert collected settings errors to response models."""
    return [
        ValidationErrorResponse(field=e.setting, code=e.code, message=e.message) for e in entries
    ]


def render_settings_field(value: str) -> str:
    """Text input bound to the stored container ID, with its description."""
    description_id = f"{FIELD_ID}-description"
    return (
        f'<label for="{FIELD_ID}">Container ID</label>\n'
        f'<input name="{escape_attr(CONTAINER_ID_OPTION)}" type="text" id="{FIELD_ID}" '
        f'aria-describedby="{description_id}" value="{escape_attr(value)}" '
        'class="regular-text code">\n'
        f'<p class="description" id="{description_id}">'
        f"The container ID in the format <code>{CONTAINER_ID_FORMAT}</code>.</p>\n"
    )


# --- Endpoints ---


@router.get(
    "",
    response_model=ContainerIdResponse,
    summary="Get GTM container ID",
)
def get_container_id(
    service: GtmSettingsService = Depends(get_settings_service),
) -> ContainerIdResponse:
    """Get the stored container ID."""
    return ContainerIdResponse(container_id=service.get())


@router.put(
    "",
    response_model=ContainerIdResponse,
    summary="Update GTM container ID",
    responses={
        400: {
            "model": ErrorResponse,
            "description": "The submitted value does not match GTM-XXXXXXX",
        },
    },
)
def update_container_id(
    request: ContainerIdUpdateRequest,
    service: GtmSettingsService = Depends(get_settings_service),
    errors: SettingsErrors = Depends(get_settings_errors),
) -> ContainerIdResponse:
    """
    Update the container ID.

    Surrounding whitespace is trimmed and the value upcased. An empty value
    clears the setting. Rejections are reported from the request's settings
    errors, which the service writes to.
    """
    result = service.update(request.container_id)

    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": "Validation failed",
                "container_id": result.container_id,
                "errors": [
                    e.model_dump()
                    for e in settings_errors_to_response(errors.get_errors(CONTAINER_ID_OPTION))
                ],
            },
        )

    return ContainerIdResponse(container_id=result.container_id)


@router.get(
    "/field",
    response_class=HTMLResponse,
    summary="Render the container ID settings field",
)
def get_settings_field(
    service: GtmSettingsService = Depends(get_settings_service),
) -> HTMLResponse:
    """HTML form field for the admin settings screen."""
    return HTMLResponse(render_settings_field(service.get()))
