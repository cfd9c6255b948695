from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from app.container import Container
from app.enums import RECOGNIZED_UNITS
from app.recipe.schema import (
    DraftResponse,
    IngredientUpdateRequest,
    RecipeListResponse,
    RecipeUpdateRequest,
    SaveResponse,
    SubmitResponse,
    UnitListResponse,
)
from app.recipe.service import RecipeService

router = APIRouter()

@router.get("/recipe/draft", response_model=DraftResponse)
@inject
async def get_draft(
    recipe_service: RecipeService = Depends(Provide[Container.recipe_service])
):
    return recipe_service.draft()


@router.patch("/recipe/draft", response_model=DraftResponse)
@inject
async def update_draft(
    request: RecipeUpdateRequest,
    recipe_service: RecipeService = Depends(Provide[Container.recipe_service])
):
    return recipe_service.update(
        name=request.name,
        instructions=request.instructions,
        preparation_time=request.preparation_time,
    )


@router.post("/recipe/draft/ingredients", response_model=DraftResponse)
@inject
async def add_ingredient(
    recipe_service: RecipeService = Depends(Provide[Container.recipe_service])
):
    return recipe_service.add_ingredient()


@router.patch("/recipe/draft/ingredients/{index}", response_model=DraftResponse)
@inject
async def update_ingredient(
    index: int,
    request: IngredientUpdateRequest,
    recipe_service: RecipeService = Depends(Provide[Container.recipe_service])
):
    return recipe_service.update_ingredient(index, request.field, request.value)


@router.delete("/recipe/draft/ingredients/{index}", response_model=DraftResponse)
@inject
async def remove_ingredient(
    index: int,
    recipe_service: RecipeService = Depends(Provide[Container.recipe_service])
):
    return recipe_service.remove_ingredient(index)


@router.post("/recipe/draft/submit", response_model=SubmitResponse)
@inject
async def submit_draft(
    recipe_service: RecipeService = Depends(Provide[Container.recipe_service])
):
    return recipe_service.submit()


@router.post("/recipe/draft/save", response_model=SaveResponse, status_code=201)
@inject
async def save_draft(
    recipe_service: RecipeService = Depends(Provide[Container.recipe_service])
):
    return SaveResponse(saved_count=recipe_service.save())


@router.post("/recipe/draft/reset", response_model=DraftResponse)
@inject
async def reset_draft(
    recipe_service: RecipeService = Depends(Provide[Container.recipe_service])
):
    return recipe_service.reset()


@router.get("/recipes", response_model=RecipeListResponse)
@inject
async def list_recipes(
    recipe_service: RecipeService = Depends(Provide[Container.recipe_service])
):
    return RecipeListResponse(recipes=recipe_service.saved_recipes())


@router.get("/units", response_model=UnitListResponse)
async def list_units():
    return UnitListResponse(units=RECOGNIZED_UNITS)
