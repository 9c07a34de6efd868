from typing import Any, Mapping

from utils.errors import BadRequestError


def quote_identifier(name: str) -> str:
    """PostgreSQL 식별자 quoting (내부 큰따옴표는 두 번 써서 escape)"""
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def build_set_clause(
    update_fields: Mapping[str, Any],
    column_map: Mapping[str, str]
) -> tuple[str, list]:
    """
    Partial update 용 UPDATE SET 절 생성.

    Args:
        update_fields: 업데이트할 필드와 값 {"numEmployees": 10, ...}
            dict 삽입 순서대로 $1, $2, ... 가 매겨진다.
        column_map: 필드 -> DB 컬럼 매핑 {"numEmployees": "num_employees"}
            매핑에 없는 필드는 필드명을 그대로 컬럼명으로 쓴다.

    Returns:
        (set_clause, values) 튜플
        - set_clause: '"num_employees"=$1, "name"=$2'
        - values: [10, "new name"]

    Raises:
        BadRequestError: update_fields 가 비어 있을 때

    Example:
        >>> build_set_clause({"testNum": 12, "testText": "test"},
        ...                  {"testNum": "test_num", "testText": "test_text"})
        ('"test_num"=$1, "test_text"=$2', [12, 'test'])
    """
    if not update_fields:
        raise BadRequestError("No data")

    set_parts = [
        f"{quote_identifier(column_map.get(field_name, field_name))}=${idx}"
        for idx, field_name in enumerate(update_fields, start=1)
    ]

    return ", ".join(set_parts), list(update_fields.values())


class WhereClause:
    """
    WHERE 조건 누적 빌더.

    조건마다 독립적으로 추가하고, placeholder 는 최종 위치 기준으로 번호를 매긴다.

    Example:
        >>> where = WhereClause()
        >>> _ = where.add("name ILIKE {}", "%net%").add("num_employees >= {}", 10)
        >>> where.build()
        (' WHERE name ILIKE $1 AND num_employees >= $2', ['%net%', 10])
    """

    def __init__(self, start: int = 1):
        self.start = start
        self.conditions: list[str] = []
        self.values: list = []

    def add(self, template: str, *values: Any) -> "WhereClause":
        """template 의 {} 자리에 다음 placeholder 를 채워 조건 추가"""
        placeholders = []
        for value in values:
            placeholders.append(f"${self.start + len(self.values)}")
            self.values.append(value)
        self.conditions.append(template.format(*placeholders))
        return self

    def build(self) -> tuple[str, list]:
        if not self.conditions:
            return "", []
        return " WHERE " + " AND ".join(self.conditions), list(self.values)


def like_pattern(term: str) -> str:
    """
    부분 일치용 LIKE 패턴. 검색어의 %, _ 는 문자 그대로 매칭되도록 escape
    (조건에 ESCAPE '\\' 를 같이 써야 함)

    Example:
        >>> like_pattern("50%_off")
        '%50\\\\%\\\\_off%'
    """
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
