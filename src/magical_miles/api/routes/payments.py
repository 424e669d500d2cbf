from fastapi import APIRouter, Depends

from magical_miles.api.auth import verify_api_key
from magical_miles.api.dependencies import PaymentServiceDep
from magical_miles.api.models.payments import PaymentRequest
from magical_miles.fare.calculator import build_group_share
from magical_miles.payment import PaymentResult

router = APIRouter(dependencies=[Depends(verify_api_key)])


@router.post("", response_model=PaymentResult)
async def pay_share(body: PaymentRequest, payments: PaymentServiceDep) -> PaymentResult:
    """Charge the rider's share of the group fare.

    The share is re-derived from the total and member count so the amount
    charged always follows the service's rounding.
    """
    share = build_group_share(body.fare_info.total_fare, body.fare_info.members)
    return await payments.pay_share(share, group_name=body.fare_info.group_name, method=body.method)


@router.get("/history", response_model=list[PaymentResult])
def payment_history(payments: PaymentServiceDep) -> list[PaymentResult]:
    return payments.history()
