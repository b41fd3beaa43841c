"""Port routes. All endpoints require a bearer token."""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from src.api.deps import get_current_account, get_port_catalog_service
from src.api.schemas import ErrorResponse, PortCreateRequest, PortUpdateRequest
from src.components.port_catalog import PortCandidate, PortCatalogService, PortEdit
from src.domain.views import PortView

router = APIRouter(
    dependencies=[Depends(get_current_account)],
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.get("", response_model=list[PortView])
def list_ports(
    service: PortCatalogService = Depends(get_port_catalog_service),
) -> list[PortView]:
    """List all ports with their terminals."""
    return service.list_ports()


@router.get("/{port_id}", response_model=PortView)
def get_port(
    port_id: int,
    service: PortCatalogService = Depends(get_port_catalog_service),
) -> PortView:
    return service.get_port(port_id)


@router.post("", response_model=PortView, status_code=status.HTTP_201_CREATED)
def create_port(
    data: PortCreateRequest,
    request: Request,
    response: Response,
    service: PortCatalogService = Depends(get_port_catalog_service),
) -> PortView:
    """Create a port. The Location header points at the new resource."""
    port = service.create_port(PortCandidate(code=data.code, name=data.name))
    response.headers["Location"] = str(request.url_for("get_port", port_id=port.id))
    return port


@router.put("", response_class=PlainTextResponse)
def update_port(
    data: PortUpdateRequest,
    service: PortCatalogService = Depends(get_port_catalog_service),
) -> str:
    service.update_port(PortEdit(id=data.id, code=data.code, name=data.name))
    return "Resource updated successfully"


@router.delete("/{port_id}", response_class=PlainTextResponse)
def delete_port(
    port_id: int,
    service: PortCatalogService = Depends(get_port_catalog_service),
) -> str:
    """Delete a port together with its terminals."""
    service.delete_port(port_id)
    return "Resource removed successfully"
