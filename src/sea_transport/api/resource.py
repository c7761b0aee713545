"""
sea_transport.api.resource

Generic REST resource shared by every entity.

Responsibilities:
- Reject client-supplied ids on create.
- Validate path/body id agreement and row existence before updates.
- Enforce the merge-patch content type on PATCH.
- Build the create/update/patch/list/get/delete router for one entity,
  with Location, alert and pagination headers.
"""

# No `from __future__ import annotations` here: the handlers built in
# `build_entity_router` annotate their bodies with closure variables, which
# FastAPI must be able to evaluate.

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import (
    HTTP_201_CREATED,
    HTTP_204_NO_CONTENT,
    HTTP_404_NOT_FOUND,
    HTTP_415_UNSUPPORTED_MEDIA_TYPE,
)

from sea_transport.api.deps import db_session, settings_dep
from sea_transport.api.headers import (
    entity_creation_alert,
    entity_deletion_alert,
    entity_update_alert,
)
from sea_transport.api.pagination import page_request, pagination_headers
from sea_transport.api.schemas import MAX_ID, CamelModel
from sea_transport.auth.deps import get_principal, require_any_role
from sea_transport.auth.models import ROLE_USER
from sea_transport.errors import BadRequestAlertError
from sea_transport.observability.logging import get_logger
from sea_transport.pagination import PageRequest
from sea_transport.services.entity_service import EntityService
from sea_transport.settings import Settings

log = get_logger(__name__)

MERGE_PATCH_JSON = "application/merge-patch+json"

EntityId = Annotated[int, Path(ge=1, le=MAX_ID)]


def ensure_new(body_id: int | None, entity_name: str) -> None:
    if body_id is not None:
        raise BadRequestAlertError(
            f"A new {entity_name} cannot already have an ID", entity_name, "idexists"
        )


async def ensure_updatable(
    service: EntityService,
    *,
    path_id: int,
    body_id: int | None,
) -> None:
    # Order matters: idnull, then idinvalid, then idnotfound.
    entity_name = service.entity_name
    if body_id is None:
        raise BadRequestAlertError("Invalid id", entity_name, "idnull")
    if body_id != path_id:
        raise BadRequestAlertError("Invalid ID", entity_name, "idinvalid")
    if not await service.exists(path_id):
        raise BadRequestAlertError("Entity not found", entity_name, "idnotfound")


def require_merge_patch(request: Request) -> None:
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type != MERGE_PATCH_JSON:
        raise HTTPException(
            status_code=HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"Content type '{media_type or 'none'}' not supported, use {MERGE_PATCH_JSON}",
        )


def build_entity_router(
    *,
    path: str,
    service_cls: type[EntityService],
    request_model: type[CamelModel],
    patch_model: type[CamelModel],
    response_model: type[CamelModel],
) -> APIRouter:
    """
    Build the REST resource for one entity under `path` (e.g. `/api/ports`).

    Reads need an authenticated principal; writes also need `ROLE_USER`.
    The entity name used in alerts and errors is the mapped table name.
    """
    model = service_cls.repo_cls.model
    entity_name: str = model.__tablename__
    not_found = f"{entity_name.capitalize()} not found"
    tag = path.rsplit("/", 1)[-1]

    router = APIRouter(prefix=path, tags=[tag], dependencies=[Depends(get_principal)])
    writer = [Depends(require_any_role(ROLE_USER))]

    def get_service(session: AsyncSession = Depends(db_session)) -> EntityService:
        return service_cls(session=session)

    @router.post(
        "",
        response_model=response_model,
        status_code=HTTP_201_CREATED,
        dependencies=writer,
        name=f"create_{entity_name}",
    )
    async def create(
        body: request_model,  # type: ignore[valid-type]
        response: Response,
        service: EntityService = Depends(get_service),
        settings: Settings = Depends(settings_dep),
    ):
        log.debug("rest.request", op="create", entity=entity_name, body=body.model_dump())
        ensure_new(body.id, entity_name)
        result = await service.save(model(**body.model_dump(exclude={"id"})))
        response.headers["Location"] = f"{path}/{result.id}"
        response.headers.update(
            entity_creation_alert(settings.app_name, entity_name, str(result.id))
        )
        return response_model.model_validate(result)

    @router.put(
        "/{entity_id}",
        response_model=response_model,
        dependencies=writer,
        name=f"update_{entity_name}",
    )
    async def update(
        entity_id: EntityId,
        body: request_model,  # type: ignore[valid-type]
        response: Response,
        service: EntityService = Depends(get_service),
        settings: Settings = Depends(settings_dep),
    ):
        log.debug("rest.request", op="update", entity=entity_name, entity_id=entity_id)
        await ensure_updatable(service, path_id=entity_id, body_id=body.id)
        result = await service.save(model(**body.model_dump()))
        response.headers.update(entity_update_alert(settings.app_name, entity_name, str(body.id)))
        return response_model.model_validate(result)

    @router.patch(
        "/{entity_id}",
        response_model=response_model,
        dependencies=[*writer, Depends(require_merge_patch)],
        name=f"partial_update_{entity_name}",
    )
    async def partial_update(
        entity_id: EntityId,
        body: patch_model,  # type: ignore[valid-type]
        response: Response,
        service: EntityService = Depends(get_service),
        settings: Settings = Depends(settings_dep),
    ):
        log.debug("rest.request", op="partial_update", entity=entity_name, entity_id=entity_id)
        await ensure_updatable(service, path_id=entity_id, body_id=body.id)
        changes = body.model_dump(exclude_unset=True, exclude={"id"})
        result = await service.partial_update(entity_id, changes)
        if result is None:
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=not_found)
        response.headers.update(entity_update_alert(settings.app_name, entity_name, str(body.id)))
        return response_model.model_validate(result)

    @router.get("", response_model=list[response_model], name=f"get_all_{tag}")
    async def get_all(
        request: Request,
        response: Response,
        pageable: PageRequest = Depends(page_request),
        service: EntityService = Depends(get_service),
    ):
        log.debug(
            "rest.request", op="list", entity=entity_name, page=pageable.page, size=pageable.size
        )
        page = await service.find_all(pageable)
        response.headers.update(pagination_headers(request.url, page))
        return [response_model.model_validate(row) for row in page.content]

    @router.get("/{entity_id}", response_model=response_model, name=f"get_{entity_name}")
    async def get_one(
        entity_id: EntityId,
        service: EntityService = Depends(get_service),
    ):
        log.debug("rest.request", op="get", entity=entity_name, entity_id=entity_id)
        result = await service.find_one(entity_id)
        if result is None:
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=not_found)
        return response_model.model_validate(result)

    @router.delete(
        "/{entity_id}",
        status_code=HTTP_204_NO_CONTENT,
        dependencies=writer,
        name=f"delete_{entity_name}",
    )
    async def delete(
        entity_id: EntityId,
        service: EntityService = Depends(get_service),
        settings: Settings = Depends(settings_dep),
    ) -> Response:
        log.debug("rest.request", op="delete", entity=entity_name, entity_id=entity_id)
        await service.delete(entity_id)
        return Response(
            status_code=HTTP_204_NO_CONTENT,
            headers=entity_deletion_alert(settings.app_name, entity_name, str(entity_id)),
        )

    return router


# --- Module Notes -----------------------------------------------------------
# PUT/PATCH on a missing row answer 400 `idnotfound` from `ensure_updatable`;
# the 404 in `partial_update` only covers a row deleted between the two steps.
