# kudos_wall/adapters/inbound/api/v1/endpoints/category_endpoint.py (async version)

from uuid import UUID
from fastapi import APIRouter, Depends, Response, status

from kudos_wall.adapters.inbound.api.deps import get_category_service, get_current_user
from kudos_wall.adapters.outbound.security.permissions import require_roles
from kudos_wall.application.dtos.category_dto import (
    CategoryCreate,
    CategoryDeleteOutput,
    CategoryListOutput,
    CategoryMutationOutput,
    CategoryUpdate,
)
from kudos_wall.application.use_cases.category_use_cases import AsyncCategoryService
from kudos_wall.domain.models.user_domain_model import UserRole

router = APIRouter()

# "TechLead" matches no role, so in practice only ADMIN passes this gate.
CATEGORY_CREATORS = ("TechLead", UserRole.ADMIN)


@router.post(
    "",
    response_model=CategoryMutationOutput,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create Category",
    description="Creates a category. If the name is taken, responds 200 with `exists: true` and writes nothing.",
    responses={200: {"description": "Category already exists", "model": CategoryMutationOutput}},
    dependencies=[Depends(require_roles(*CATEGORY_CREATORS))],
)
async def create_category(
        category_input: CategoryCreate,
        response: Response,
        service: AsyncCategoryService = Depends(get_category_service),
):
    result = await service.create_category(category_input)
    if result.exists:
        response.status_code = status.HTTP_200_OK
    return result


@router.get(
    "",
    response_model=CategoryListOutput,
    summary="List Categories",
    dependencies=[Depends(get_current_user)],
)
async def list_categories(service: AsyncCategoryService = Depends(get_category_service)):
    return await service.list_categories()


@router.put(
    "/{category_id}",
    response_model=CategoryMutationOutput,
    response_model_exclude_none=True,
    summary="Update Category",
    responses={404: {"description": "Category not found"}},
    dependencies=[Depends(require_roles(UserRole.ADMIN))],
)
async def update_category(
        category_id: UUID,
        category_input: CategoryUpdate,
        service: AsyncCategoryService = Depends(get_category_service),
):
    return await service.update_category(category_id, category_input)


@router.delete(
    "/{category_id}",
    response_model=CategoryDeleteOutput,
    summary="Delete Category",
    responses={404: {"description": "Category not found"}},
    dependencies=[Depends(require_roles(UserRole.ADMIN))],
)
async def delete_category(category_id: UUID, service: AsyncCategoryService = Depends(get_category_service)):
    return await service.delete_category(category_id)
