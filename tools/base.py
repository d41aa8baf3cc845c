from dataclasses import dataclass
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Type, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError, create_model

from core.client import FreepikClient
from core.errors import ToolInputError

_PY_TYPES: Dict[str, Any] = {
    "string": str,
    "boolean": bool,
    "object": Dict[str, Any],
    "array": List[Any],
}


def _whole_to_int(value: float) -> Union[int, float]:
    return int(value) if value.is_integer() else value


@dataclass(frozen=True)
class Param:
    """
    One row of a tool's argument table.
    Both the advertised JSON schema and the validation model come from here.
    """

    name: str
    type: str
    description: str
    required: bool = False
    default: Any = None
    enum: Optional[Tuple[Any, ...]] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    items: Optional[Dict[str, Any]] = None
    properties: Optional[Dict[str, Any]] = None

    def json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.type}
        if self.items is not None:
            schema["items"] = self.items
        if self.properties is not None:
            schema["properties"] = self.properties
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        if self.maximum is not None:
            schema["maximum"] = self.maximum
        schema["description"] = self.description
        if self.default is not None:
            schema["default"] = self.default
        return schema

    def field(self) -> Tuple[Any, Any]:
        if self.enum is not None:
            annotation = Literal[self.enum]
        elif self.type == "number":
            # whole numbers come out as int so ids and counts are not sent as 1.0
            bounds = Field(ge=self.minimum, le=self.maximum)
            annotation = Union[
                Annotated[int, bounds],
                Annotated[float, bounds, AfterValidator(_whole_to_int)],
            ]
        elif self.type == "string" and self.required:
            annotation = Annotated[str, Field(min_length=1)]
        else:
            annotation = _PY_TYPES[self.type]

        if self.required:
            default = ...
        else:
            default = self.default
            if default is None:
                annotation = Optional[annotation]

        return annotation, Field(default, description=self.description)


class MCPTool:
    name: str
    description: str
    params: Tuple[Param, ...] = ()

    _input_model: Optional[Type[BaseModel]] = None

    def schema(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": {
                "type": "object",
                "properties": {p.name: p.json_schema() for p in self.params},
                "required": [p.name for p in self.params if p.required],
            },
        }

    @classmethod
    def input_model(cls) -> Type[BaseModel]:
        # cached per subclass, not inherited from the base
        if cls.__dict__.get("_input_model") is None:
            cls._input_model = create_model(
                f"{cls.__name__}Input",
                __config__=ConfigDict(extra="forbid", coerce_numbers_to_str=True),
                **{p.name: p.field() for p in cls.params},
            )
        return cls._input_model

    def validate(self, arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Resolve arguments against the table: defaults applied, bad input rejected."""
        try:
            model = self.input_model().model_validate(arguments or {})
        except ValidationError as exc:
            raise ToolInputError(self.name, _describe(exc)) from exc
        return model.model_dump()

    def execute(self, args: Dict[str, Any], client: FreepikClient) -> str:
        raise NotImplementedError


def _describe(exc: ValidationError) -> List[str]:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "arguments"
        problems.append(f"{location}: {error['msg']}")
    return problems
