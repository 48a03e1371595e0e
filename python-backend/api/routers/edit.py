"""
Edit API Router - Apply operations to registry images
"""

from typing import Annotated, List

from fastapi import APIRouter, Body, Depends

from api.dependencies import get_edit_service, get_registry_lock
from api.exceptions import safe_endpoint
from core.enums import OperationKind
from schemas import OperationResult, OperationUnion

router = APIRouter()


@router.post("/apply")
@safe_endpoint
def apply_operation(
    operation: Annotated[OperationUnion, Body(discriminator="kind")],
    edit_service=Depends(get_edit_service),
    registry_lock=Depends(get_registry_lock),
) -> OperationResult:
    """
    Apply one edit operation.

    The body is tagged by ``kind`` (see ``GET /api/edit/operations``). The
    result is written under the destination name(s); nothing is written if the
    operation is rejected.
    """
    with registry_lock:
        return edit_service.execute(operation)


@router.get("/operations")
async def list_operations() -> List[str]:
    """List operation kinds accepted by /apply"""
    return [kind.value for kind in OperationKind]
