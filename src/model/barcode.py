# RU: Домейн-модель штрих-кода Code 39 с fail-fast валидацией, allowlist опций и опциональной записью ошибки.
# EN: Domain Code 39 barcode model with fail-fast validation, option allowlist, and optional error recording.

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, Dict, FrozenSet, Optional

from src.code39.config import RenderConfig
from src.code39.errors import Code39Error
from src.code39.generator import generate_or_fail, validate_input

logger = logging.getLogger(__name__)


@dataclass
class Code39Barcode:
    """
    Domain-level dataclass for a Code 39 barcode with:
        - Option allowlist validation (render options only)
        - Data validation against the Code 39 repertoire
        - GUI-/API-friendly: errors recordable instead of throwing
        - Dict round-trip with schema version

    Examples (integration):
        bc = Code39Barcode(data="HELLO-123", options={"format": "vector"})
        ok = bc.validate(record_error=True)
        if not ok:
            print(bc.validation_error_message)
        svg = bc.render()
    """

    schema_version: ClassVar[str] = "1.0"

    OPTIONS_ALLOWLIST: ClassVar[FrozenSet[str]] = frozenset(
        {"format", "module_width", "bar_height", "quiet_zone", "width", "height"}
    )

    data: str
    options: Dict[str, Any] = field(default_factory=dict)
    caption: Optional[str] = None
    user_label: Optional[str] = None
    object_id: Optional[str] = None

    validation_state: Optional[str] = None
    validation_error_message: Optional[str] = None

    metadata: Dict[str, Any] = field(default_factory=dict)

    def _validate_options(self) -> None:
        for k in self.options:
            if k not in self.OPTIONS_ALLOWLIST:
                raise ValueError(f"Option '{k}' not allowed for Code 39 barcode")

    def render_config(self) -> RenderConfig:
        """Build the render config from options. Raises InvalidConfigurationError."""
        self._validate_options()
        return RenderConfig.from_dict(self.options)

    def validate(self, record_error: bool = False) -> bool:
        """
        Validates the barcode object:
        - Option allowlist and render config
        - Data against the Code 39 repertoire (first invalid char wins)
        - If record_error: on error, sets self.validation_error_message instead of raising

        Returns: True if ok, False if error (when record_error)
        Raises: ValueError / Code39Error subclasses if error and not record_error
        """
        logger.info("Validating Code39Barcode: data=%r", self.data)
        try:
            self.render_config()
            result = validate_input(self.data)
            if not result.ok:
                assert result.error is not None
                raise result.error.to_exception()

            self.validation_state = "ok"
            self.validation_error_message = None
            return True
        except (ValueError, TypeError, Code39Error) as ex:
            msg: str = str(ex)
            logger.warning("Barcode validation error: %s", msg)
            self.validation_state = "invalid"
            self.validation_error_message = msg
            if record_error:
                return False
            raise

    def render(self) -> str:
        return generate_or_fail(self.data, self.render_config())

    def to_dict(self) -> Dict[str, Any]:
        dct: Dict[str, Any] = asdict(self)
        dct["schema_version"] = self.schema_version
        return dct

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Code39Barcode":
        d = dict(d)
        if "schema_version" in d and d["schema_version"] != cls.schema_version:
            logger.warning(
                "Schema version mismatch (expected %s, got %s)",
                cls.schema_version,
                d["schema_version"],
            )
        d.pop("schema_version", None)
        return cls(**d)

    def __str__(self) -> str:
        datashow: str = self.data[:16] + ("..." if len(self.data) > 16 else "")
        return f"Code39Barcode(data={datashow})"
