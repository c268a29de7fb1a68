from collections import defaultdict
from typing import Any, Dict

import msgspec

from .log_level import LogLevel


class Entry(msgspec.Struct, kw_only=True):
    message: str | None = None
    tags: set[str] = msgspec.field(
        default_factory=set,
    )
    level: LogLevel

    def to_template(
        self,
        template: str,
        context: Dict[str, Any] | None = None,
    ) -> str:
        """
        Render ``template`` with the entry's fields plus ``context``.
        Placeholders for fields this entry type does not carry render
        as ``-`` so one template can serve several entry types.
        """
        kwargs: Dict[str, Any] = defaultdict(lambda: "-")
        kwargs.update(
            {field: getattr(self, field) for field in self.__struct_fields__}
        )

        kwargs["level"] = self.level.value

        kwargs["tags"] = ",".join(sorted(self.tags)) or "-"

        if context:
            kwargs.update(context)

        return template.format_map(kwargs)
