from pathlib import Path

from notebuilder.config import settings


class FileManager:
    def chart_dir(self, chart_id: str) -> Path:
        d = settings.charts_dir / chart_id
        d.mkdir(parents=True, exist_ok=True)
        return d

    def audio_path(self, chart_id: str, suffix: str = ".mp3") -> Path:
        return self.chart_dir(chart_id) / f"original{suffix}"

    def chart_path(self, chart_id: str) -> Path:
        return self.chart_dir(chart_id) / "chart.txt"

    def chart_exists(self, chart_id: str) -> bool:
        """Check for a written chart without creating the directory."""
        return (settings.charts_dir / chart_id / "chart.txt").exists()


file_manager = FileManager()
