"""Counter document used to hand out sequential numeric ids."""

from beanie import Document
from pymongo import ReturnDocument


class Counter(Document):
    """Named monotonically increasing sequence."""

    id: str
    seq: int = 0

    class Settings:
        name = "counters"

    @classmethod
    async def next_value(cls, sequence: str) -> int:
        """Atomically increment the named sequence and return its new value.

        The counter document is created on first use.
        """
        result = await cls.get_motor_collection().find_one_and_update(
            {"_id": sequence},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return result["seq"]
