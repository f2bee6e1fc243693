"""Address controller - 현재 사용자의 배송지."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from apps.storefront.application.addresses.commands import (
    CreateAddressInteractor,
    DeleteAddressInteractor,
    UpdateAddressInteractor,
)
from apps.storefront.application.addresses.dto import AddressInput, AddressPatch
from apps.storefront.application.addresses.queries import GetAddressQuery, ListAddressesQuery
from apps.storefront.application.token.dto import AuthSession
from apps.storefront.presentation.http.auth.dependencies import get_current_session
from apps.storefront.presentation.http.schemas.addresses import (
    AddressCreateRequest,
    AddressResponse,
    AddressUpdateRequest,
)
from apps.storefront.setup.dependencies import (
    get_create_address_interactor,
    get_delete_address_interactor,
    get_get_address_query,
    get_list_addresses_query,
    get_update_address_interactor,
)

router = APIRouter(prefix="/users/address")


@router.get("", response_model=list[AddressResponse])
async def list_addresses(
    session: AuthSession = Depends(get_current_session),
    query: ListAddressesQuery = Depends(get_list_addresses_query),
) -> list[AddressResponse]:
    return [AddressResponse.model_validate(a) for a in await query.execute(session.user_id)]


@router.post("", response_model=AddressResponse, status_code=status.HTTP_201_CREATED)
async def create_address(
    body: AddressCreateRequest,
    session: AuthSession = Depends(get_current_session),
    interactor: CreateAddressInteractor = Depends(get_create_address_interactor),
) -> AddressResponse:
    address = await interactor.execute(session.user_id, AddressInput(**body.model_dump()))
    return AddressResponse.model_validate(address)


@router.get("/{address_id}", response_model=AddressResponse)
async def get_address(
    address_id: int,
    session: AuthSession = Depends(get_current_session),
    query: GetAddressQuery = Depends(get_get_address_query),
) -> AddressResponse:
    return AddressResponse.model_validate(await query.execute(session.user_id, address_id))


@router.patch("/{address_id}", response_model=AddressResponse)
async def update_address(
    address_id: int,
    body: AddressUpdateRequest,
    session: AuthSession = Depends(get_current_session),
    interactor: UpdateAddressInteractor = Depends(get_update_address_interactor),
) -> AddressResponse:
    address = await interactor.execute(
        session.user_id, address_id, AddressPatch(**body.model_dump())
    )
    return AddressResponse.model_validate(address)


@router.delete("/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_address(
    address_id: int,
    session: AuthSession = Depends(get_current_session),
    interactor: DeleteAddressInteractor = Depends(get_delete_address_interactor),
) -> Response:
    await interactor.execute(session.user_id, address_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
