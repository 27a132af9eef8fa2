import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Set


@dataclass
class GeneratorStatistics:
    # Worklist
    seeded: int = 0
    dispatched: int = 0
    admitted: int = 0
    duplicate_candidates: int = 0
    pool_evictions: int = 0

    # Feedback
    recorded: int = 0
    ignored_records: int = 0
    redundant: int = 0
    retained: int = 0
    history_evictions: int = 0

    # Distinct end-of-run memory images, by fingerprint
    end_states: Set[str] = field(default_factory=set)

    def record_feedback(self, *, accepted: bool, history_evictions: int, state_fp: str):
        self.recorded += 1
        self.end_states.add(state_fp)
        if accepted:
            self.retained += 1
            self.history_evictions += history_evictions
        else:
            self.redundant += 1

    @property
    def distinct_end_states(self) -> int:
        return len(self.end_states)

    def summary(self) -> Dict[str, Any]:
        out = asdict(self)
        out.pop("end_states")
        out["distinct_end_states"] = self.distinct_end_states
        return out

    def log_summary(self, prefix: str = "Generator") -> None:
        summary = " | ".join(f"{k}={v}" for k, v in self.summary().items())
        logging.info(f"{prefix}: {summary}")
