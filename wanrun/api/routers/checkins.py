from fastapi import APIRouter, Depends, status

from wanrun.api.deps import get_checkin_service, get_identity
from wanrun.identity import Identity
from wanrun.schemas.interaction import CheckinRequest
from wanrun.services.checkin import CheckinService

router = APIRouter(prefix="/dogrun", tags=["checkins"])


@router.post("/checkin", status_code=status.HTTP_204_NO_CONTENT)
def checkin_dogrun(
    body: CheckinRequest,
    identity: Identity = Depends(get_identity),
    service: CheckinService = Depends(get_checkin_service),
):
    """
    Check the caller's dogs in at a dogrun for today.

    Checking in again on the same day is a no-op for dogs already checked in.
    """
    service.checkin_dogrun(identity, body.dogrun_id, body.dog_ids)
