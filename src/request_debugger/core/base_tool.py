# core/base_tool.py

from abc import ABC, abstractmethod
from typing import Any, Dict, Type, Union
from pydantic import BaseModel, ValidationError

from ..common.logger import LoggerFactory, LogLevel


class BaseTool(ABC):
    """Base class for the debugger's tools."""

    def __init__(
        self,
        name: str,
        description: str,
        input_schema: Type[BaseModel],
        output_schema: Type[BaseModel],
        verbose: bool = False,
    ):
        """Initialize the tool.

        Args:
            name: Tool name
            description: Tool description
            input_schema: Pydantic model for validating inputs
            output_schema: Pydantic model for validating outputs
            verbose: Whether to log detailed information
        """
        self.name = name
        self.description = description
        self.input_schema = input_schema
        self.output_schema = output_schema
        self.verbose = verbose

        self.logger = LoggerFactory.get_logger(
            name=f"tool.{name}", level=LogLevel.DEBUG if verbose else None
        )

    @abstractmethod
    async def _execute(self, input_data: BaseModel) -> Any:
        """Execute the tool's core logic on validated input."""
        pass

    async def execute(self, input_data: Union[Dict[str, Any], BaseModel]) -> BaseModel:
        """Execute the tool with input and output validation.

        Args:
            input_data: The input data for the tool

        Returns:
            The tool's output
        """
        try:
            if isinstance(input_data, dict):
                validated_input = self.input_schema(**input_data)
            else:
                validated_input = input_data

            raw_output = await self._execute(validated_input)

            if isinstance(raw_output, self.output_schema):
                return raw_output
            if isinstance(raw_output, dict):
                return self.output_schema(**raw_output)
            return self.output_schema(result=raw_output)

        except ValidationError as e:
            self.logger.error(f"Validation error: {e}")
            raise
