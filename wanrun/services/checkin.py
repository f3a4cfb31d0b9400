import logging
from collections.abc import Callable, Sequence
from datetime import date

from wanrun.core.config import settings
from wanrun.db.models.checkin import DogrunCheckin as DogrunCheckinModel
from wanrun.domain.checkin_day import CheckinDayPolicy
from wanrun.domain.id_batch import id_batch_problem
from wanrun.errors import DomainValidationError, ErrorDomain
from wanrun.facades.interfaces import DogFacadeInterface, DogrunFacadeInterface
from wanrun.identity import Identity
from wanrun.repositories.interfaces import CheckinRepositoryInterface

logger = logging.getLogger(__name__)


def current_checkin_day() -> date:
    return CheckinDayPolicy(timezone=settings.checkin_timezone).today()


class CheckinService:
    """Records that a dog owner's dogs are at a dogrun today.

    There is no check-out: once a (dogrun, dog, day) check-in exists it is
    only ever re-saved.
    """

    def __init__(
        self,
        repo: CheckinRepositoryInterface,
        dogrun_facade: DogrunFacadeInterface,
        dog_facade: DogFacadeInterface,
        today: Callable[[], date] = current_checkin_day,
    ) -> None:
        self._repo = repo
        self._dogrun_facade = dogrun_facade
        self._dog_facade = dog_facade
        self._today = today

    def checkin_dogrun(self, identity: Identity, dogrun_id: int, dog_ids: Sequence[int]) -> None:
        """
        Check the caller's dogs in at a dogrun for today.

        - Validates the batch of dog IDs (non-empty, bounded, no repeated IDs)
        - Validates the dogrun exists
        - Validates the caller owns every dog
        - Reuses today's check-in of a dog if there is one, otherwise builds a new one
        - Saves all of them in one upsert

        Checking in again on the same day leaves a single record per dog with
        its id unchanged. Nothing is written if any validation fails.

        Raises:
            DomainValidationError: If the dog ID batch is malformed
            NotFoundError: If the dogrun does not exist
            ForbiddenError: If any dog is not owned by the caller
        """
        problem = id_batch_problem(dog_ids, settings.max_batch_size)
        if problem:
            raise DomainValidationError(f"Invalid dog IDs: {problem}", domain=ErrorDomain.INTERACTION)

        self._dogrun_facade.check_dogruns_exist([dogrun_id])
        self._dog_facade.check_dogs_owned_by(identity, dog_ids)

        checkin_date = self._today()
        checkins: list[DogrunCheckinModel] = []
        for dog_id in dog_ids:
            checkin = self._repo.find_checkin(dogrun_id, dog_id, checkin_date)
            if checkin is None:
                logger.info(
                    "New check-in today: dogrun_id=%s dog_id=%s date=%s",
                    dogrun_id,
                    dog_id,
                    checkin_date,
                )
                checkin = DogrunCheckinModel(
                    dogrun_id=dogrun_id, dog_id=dog_id, checkin_date=checkin_date
                )
            checkins.append(checkin)

        self._repo.upsert_checkins(checkins)
        logger.info(
            "Checked in: dog_owner_id=%s dogrun_id=%s dog_ids=%s",
            identity.dog_owner_id,
            dogrun_id,
            list(dog_ids),
        )
