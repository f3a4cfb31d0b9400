from wanrun.db.models.dog_owner import DogOwner
from wanrun.db.models.dog import Dog
from wanrun.db.models.dogrun import Dogrun
from wanrun.db.models.bookmark import DogrunBookmark
from wanrun.db.models.checkin import DogrunCheckin

__all__ = ["DogOwner", "Dog", "Dogrun", "DogrunBookmark", "DogrunCheckin"]
