"""Protected landing page for signed-in students."""

from fastapi import APIRouter

from auctionauth.api.dependencies import AccountStoreDep, CurrentAccountDep
from auctionauth.api.models import AccountResponse, APIResponse, account_to_response
from auctionauth.auth import AccessDeniedError

router = APIRouter(tags=["main"])


@router.get("/main", response_model=APIResponse[AccountResponse])
def main_page(account_id: CurrentAccountDep, store: AccountStoreDep) -> APIResponse[AccountResponse]:
    """Profile of the signed-in student."""
    account = store.fetch_by_id(account_id)
    if account is None:
        raise AccessDeniedError()
    return APIResponse(data=account_to_response(account))
