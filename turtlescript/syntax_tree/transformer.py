"""
Program Transformer for converting parsed commands to other representations.

This module provides utilities for transforming a parsed program back
into script text or into tabular form for inspection.
"""

from dataclasses import fields
from typing import Any

import numpy as np
import pandas as pd

from turtlescript.syntax_tree.nodes import Command, Program

# Parameter columns of the tabular form, in display order
PARAMETER_COLUMNS = ["angle", "distance", "x", "y", "width", "r", "g", "b"]


class ProgramTransformer:
    """
    Transforms programs into other formats.

    Provides methods to convert a program to:
    - canonical script text (re-parses to an equal program)
    - structured parameters (one dict per command)
    - a pandas DataFrame (one row per command)
    """

    def transform_to_script(self, program: Program) -> str:
        """
        Transform a program to script text, one command per line.

        Args:
            program: The commands to render

        Returns:
            Script text
        """
        return "\n".join(str(command) for command in program)

    def transform_to_structured(self, command: Command) -> dict[str, Any]:
        """
        Transform a command to structured parameters.

        Args:
            command: The command to transform

        Returns:
            Dictionary with the command name, its named arguments and its
            source position
        """
        return {
            "command": type(command).__name__,
            "arguments": {
                f.name: getattr(command, f.name)
                for f in fields(command)  # type: ignore[arg-type]
                if f.name != "position"
            },
            "position": command.position,
        }

    def transform_to_frame(self, program: Program) -> pd.DataFrame:
        """
        Transform a program to a DataFrame.

        Parameters a command does not take are NaN.

        Args:
            program: The commands to transform

        Returns:
            DataFrame with command, position and float32 parameter columns
        """
        records = []
        for command in program:
            structured = self.transform_to_structured(command)
            record: dict[str, Any] = {
                "command": structured["command"],
                "position": structured["position"],
            }
            record.update(structured["arguments"])
            records.append(record)

        columns = ["command", "position"] + PARAMETER_COLUMNS
        df = pd.DataFrame.from_records(records, columns=columns)
        df["command"] = df["command"].astype(object)
        df["position"] = df["position"].astype(np.int64)
        df[PARAMETER_COLUMNS] = df[PARAMETER_COLUMNS].astype(np.float32)
        return df
