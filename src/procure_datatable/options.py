from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .config import TableConfig
from .exceptions import InvalidPageSizeError, InvalidTableOptionsError
from .sorting import SortDirection, SortState


class SortSpec(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    column_key: str = Field(alias="columnKey")
    direction: SortDirection = SortDirection.ASC

    @field_validator("direction", mode="before")
    @classmethod
    def _normalize_direction(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def to_state(self) -> SortState:
        return SortState(column_key=self.column_key, direction=self.direction)


class TableOptions(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    table_id: str = "table"
    page_size: int | None = Field(default=None, gt=0, alias="pageSize")
    initial_sort: SortSpec | None = Field(default=None, alias="initialSort")
    paginate: bool = True
    selectable: bool = False
    expandable: bool = False
    column_visibility: dict[str, bool] = Field(default_factory=dict, alias="columnVisibility")

    def resolved_page_size(self, config: TableConfig) -> int:
        page_size = self.page_size or config.default_page_size
        if page_size > config.max_page_size:
            raise InvalidPageSizeError(page_size, config.max_page_size)
        return page_size


def normalize_options(options: TableOptions | dict[str, Any] | None) -> TableOptions:
    if options is None:
        return TableOptions()
    if isinstance(options, TableOptions):
        return options
    try:
        return TableOptions.model_validate(options)
    except ValidationError as exc:
        raise InvalidTableOptionsError(f"Invalid table options: {exc}") from exc
