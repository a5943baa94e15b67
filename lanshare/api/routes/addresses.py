"""
LAN address listing route.

GET /api/v1/addresses returns the host's non-loopback IPv4 addresses,
recomputed on every request.
"""

from fastapi import APIRouter, Depends

from lanshare.api.deps import get_address_source
from lanshare.api.schemas import AddressesResponse
from lanshare.components.sharing import run_list_addresses
from lanshare.core.ports import AddressSourcePort

router = APIRouter()


@router.get("", response_model=AddressesResponse, summary="List LAN addresses")
def list_addresses(
    addresses: AddressSourcePort = Depends(get_address_source),
) -> AddressesResponse:
    result = run_list_addresses(addresses=addresses)
    return AddressesResponse(addresses=result.addresses)
