"""Value Object Base."""


class ValueObject:
    """값 객체 마커 베이스.

    구현체는 ``@dataclass(frozen=True, slots=True)`` 로 선언하여
    값 기반 동등성과 불변성을 보장합니다.
    """

    __slots__ = ()
