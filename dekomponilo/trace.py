"""
Execution trace for a single decomposition.

Records what the decomposer did for one word (sorting, search, correction)
so a result can be explained after the fact.
"""
import json
import uuid
from datetime import datetime, timezone


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


class DecompositionTrace:
    """
    Represents a single, complete trace of one decompose() call.
    """
    def __init__(self, word: str):
        self.trace_id = str(uuid.uuid4())
        self.start_time = _now()
        self.end_time = None
        self.word = word
        self.steps = []
        self.result = None
        self.error = None

    def add_step(self, step_name: str, inputs: dict, outputs: dict, description: str = None):
        """
        Adds a step to the trace.

        Args:
            step_name: The name of the stage (e.g., "Sort", "Search", "Correction").
            inputs: A dictionary of inputs to the step.
            outputs: A dictionary of outputs from the step.
            description: An optional natural language description of the step.
        """
        step = {
            "step_id": len(self.steps) + 1,
            "name": step_name,
            "timestamp": _now(),
            "inputs": inputs,
            "outputs": outputs,
        }
        if description:
            step["description"] = description
        self.steps.append(step)

    def set_result(self, result):
        """Stores the final decomposition (as wire dicts) and concludes the trace."""
        self.result = result.to_list()
        self.end_time = _now()

    def set_error(self, error_message: str):
        """Records an error and concludes the trace."""
        self.error = error_message
        self.end_time = _now()

    def to_json(self, indent=2):
        """Serializes the trace to a JSON string."""
        return json.dumps(self, default=lambda o: o.__dict__, indent=indent, ensure_ascii=False)
