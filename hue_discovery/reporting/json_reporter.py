"""JSON report generator for discovery results."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from ..discovery.ssdp_collector import DiscoveryResult


class JsonReporter:
    """Generates JSON reports from discovery results."""

    def generate(
        self,
        result: Optional[DiscoveryResult],
        man: str,
        error: Optional[str] = None,
    ) -> dict[str, Any]:
        """Generate a JSON report from a discovery call.

        Args:
            result: Full or partial discovery result. None if nothing ran.
            man: MAN header value that was sent.
            error: Error message if discovery failed.

        Returns:
            Report dictionary ready for JSON serialization.
        """
        result = result or DiscoveryResult()

        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "man": man,
            "status": "failed" if error else "completed",
            "addresses": list(result.addresses),
            "response_count": result.response_count,
            "duration_ms": int(result.duration * 1000),
            "error": error,
        }

    def save(self, report: dict[str, Any], path: Path) -> Path:
        """Save report to a JSON file.

        Returns:
            Path to the saved file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        return path

    def to_json_string(self, report: dict[str, Any], pretty: bool = True) -> str:
        if pretty:
            return json.dumps(report, indent=2, ensure_ascii=False)
        return json.dumps(report, ensure_ascii=False)

    def generate_cli_output(
        self,
        report: dict[str, Any],
        report_path: Optional[str] = None,
    ) -> dict[str, Any]:
        """Wrap a report in the CLI JSON envelope.

        {
            "success": bool,
            "command": "discover",
            "data": { ... },
            "message": str
        }
        """
        success = report["status"] == "completed"

        data: dict[str, Any] = {
            "addresses": report["addresses"],
            "response_count": report["response_count"],
            "duration_ms": report["duration_ms"],
        }

        if report_path:
            data["report_path"] = report_path

        if not success:
            message = f"Discovery failed: {report['error']}"
        elif report["addresses"]:
            message = (
                f"Found {len(report['addresses'])} bridge(s) "
                f"({report['response_count']} responder(s))"
            )
        else:
            message = f"No bridges found ({report['response_count']} responder(s))"

        return {
            "success": success,
            "command": "discover",
            "data": data,
            "message": message,
        }
