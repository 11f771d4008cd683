import json
import os
from datetime import datetime, timezone

class RunLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="brusque_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def log(self, entry: dict):
        """Append a single entry to the run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_run(self, machine_path, simulation, verbose=False):
        """Record how a finished simulation ended."""
        self.log({
            "machine": str(machine_path),
            "start_state": simulation.machine.names[simulation.machine.start],
            "final_state": simulation.state_name,
            "steps": simulation.counter.total,
            "verbose": verbose,
            "timestamp": datetime.now(timezone.utc).isoformat()
        })
