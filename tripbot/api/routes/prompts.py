from fastapi import APIRouter, Depends, Header, HTTPException

from tripbot.api.core.container import get_container
from tripbot.api.schemas import CategoryList, RenderRequest, RenderResponse
from tripbot.core.errors import TemplateNotFound
from tripbot.observability.tracing import bind_trace


router = APIRouter(prefix="/prompts", tags=["Prompts"])


@router.get("", summary="List available prompt templates", response_model=CategoryList)
def list_prompts(container=Depends(get_container)) -> CategoryList:
    return CategoryList(categories=container.engine.list_available())


@router.post("/reload", summary="Reload prompt templates from disk", response_model=CategoryList)
def reload_prompts(container=Depends(get_container)) -> CategoryList:
    container.engine.reload()
    return CategoryList(categories=container.engine.list_available())


@router.post(
    "/{category}/render",
    summary="Render a prompt template",
    response_model=RenderResponse,
)
def render_prompt(
    category: str,
    payload: RenderRequest,
    x_trace_id: str | None = Header(default=None),
    container=Depends(get_container),
) -> RenderResponse:
    with bind_trace(x_trace_id) as trace_id:
        try:
            text = container.engine.render(category, payload.variables)
        except TemplateNotFound as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
    return RenderResponse(category=category, text=text, trace_id=trace_id)
