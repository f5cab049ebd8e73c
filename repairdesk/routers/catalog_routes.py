# repairdesk/routers/catalog_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from repairdesk.db import get_session
from repairdesk.models import Problem, DeviceType, Brand, DeviceModel, User
from repairdesk.schemas import (
    CatalogItemCreate,
    CatalogItemPublic,
    DeviceModelCreate,
    DeviceModelPublic,
)
from repairdesk.auth import get_current_user
from repairdesk.deps import require_role

router = APIRouter(
    tags=["catalog"],
)


@router.get("/problems", response_model=List[CatalogItemPublic])
def list_problems(session: Session = Depends(get_session)):
    return session.exec(select(Problem).order_by(Problem.name)).all()


@router.post("/problems", response_model=CatalogItemPublic, status_code=201)
def create_problem(
    item: CatalogItemCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    require_role(current_user, "admin")

    problem = Problem(name=item.name)
    session.add(problem)
    session.commit()
    session.refresh(problem)
    return problem


@router.get("/device-types", response_model=List[CatalogItemPublic])
def list_device_types(session: Session = Depends(get_session)):
    return session.exec(select(DeviceType).order_by(DeviceType.name)).all()


@router.post("/device-types", response_model=CatalogItemPublic, status_code=201)
def create_device_type(
    item: CatalogItemCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    require_role(current_user, "admin")

    device_type = DeviceType(name=item.name, image=item.image)
    session.add(device_type)
    session.commit()
    session.refresh(device_type)
    return device_type


@router.get("/brands", response_model=List[CatalogItemPublic])
def list_brands(session: Session = Depends(get_session)):
    return session.exec(select(Brand).order_by(Brand.name)).all()


@router.post("/brands", response_model=CatalogItemPublic, status_code=201)
def create_brand(
    item: CatalogItemCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    require_role(current_user, "admin")

    brand = Brand(name=item.name, image=item.image)
    session.add(brand)
    session.commit()
    session.refresh(brand)
    return brand


@router.get("/brands/{brand_id}/models", response_model=List[DeviceModelPublic])
def list_models(brand_id: int, session: Session = Depends(get_session)):
    if session.get(Brand, brand_id) is None:
        raise HTTPException(status_code=404, detail="Brand not found")

    return session.exec(
        select(DeviceModel)
        .where(DeviceModel.brand_id == brand_id)
        .order_by(DeviceModel.name)
    ).all()


@router.post("/brands/{brand_id}/models", response_model=DeviceModelPublic, status_code=201)
def create_model(
    brand_id: int,
    item: DeviceModelCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    require_role(current_user, "admin")

    if session.get(Brand, brand_id) is None:
        raise HTTPException(status_code=404, detail="Brand not found")

    device_model = DeviceModel(name=item.name, brand_id=brand_id, image=item.image)
    session.add(device_model)
    session.commit()
    session.refresh(device_model)
    return device_model
