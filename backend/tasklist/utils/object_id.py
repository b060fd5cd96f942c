from typing import Optional, Union

from bson import ObjectId
from bson.errors import InvalidId


def safe_object_id(value: Union[str, ObjectId, None]) -> Optional[ObjectId]:
    """
    str/ObjectId 입력을 안전하게 ObjectId로 변환합니다.
    변환 불가(형식 오류, None)면 None을 반환하므로 호출 측에서 not found로 처리합니다.
    """
    if isinstance(value, ObjectId):
        return value

    # 공백 방지 안전망
    if isinstance(value, str):
        value = value.strip()

    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None
