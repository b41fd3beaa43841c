"""Terminal routes. All endpoints require a bearer token."""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from src.api.deps import get_current_account, get_terminal_service
from src.api.schemas import ErrorResponse, TerminalCreateRequest, TerminalUpdateRequest
from src.components.terminals import TerminalCandidate, TerminalEdit, TerminalService
from src.domain.views import TerminalView

router = APIRouter(
    dependencies=[Depends(get_current_account)],
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.get("", response_model=list[TerminalView])
def list_terminals(
    service: TerminalService = Depends(get_terminal_service),
) -> list[TerminalView]:
    return service.list_terminals()


@router.get("/{terminal_id}", response_model=TerminalView)
def get_terminal(
    terminal_id: int,
    service: TerminalService = Depends(get_terminal_service),
) -> TerminalView:
    return service.get_terminal(terminal_id)


@router.post("", response_model=TerminalView, status_code=status.HTTP_201_CREATED)
def create_terminal(
    data: TerminalCreateRequest,
    request: Request,
    response: Response,
    service: TerminalService = Depends(get_terminal_service),
) -> TerminalView:
    """Create a terminal. The response embeds the parent port."""
    terminal = service.create_terminal(
        TerminalCandidate(
            name=data.name,
            port_id=data.port_id,
            latitude=data.latitude,
            longitude=data.longitude,
            is_active=data.is_active,
        )
    )
    response.headers["Location"] = str(request.url_for("get_terminal", terminal_id=terminal.id))
    return terminal


@router.put("", response_class=PlainTextResponse)
def update_terminal(
    data: TerminalUpdateRequest,
    service: TerminalService = Depends(get_terminal_service),
) -> str:
    service.update_terminal(
        TerminalEdit(
            id=data.id,
            name=data.name,
            port_id=data.port_id,
            latitude=data.latitude,
            longitude=data.longitude,
            is_active=data.is_active,
        )
    )
    return "Resource updated successfully"


@router.delete("/{terminal_id}", response_class=PlainTextResponse)
def delete_terminal(
    terminal_id: int,
    service: TerminalService = Depends(get_terminal_service),
) -> str:
    service.delete_terminal(terminal_id)
    return "Resource removed successfully"
