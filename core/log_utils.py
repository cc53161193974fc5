import os
from datetime import datetime
from pathlib import Path


LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE = Path(os.environ.get("FORUM_LOG_FILE") or LOG_DIR / "app.log")


def log(message: str, error: BaseException = None) -> None:
    """Log to stdout and append to logs/app.log."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    line = f"{timestamp} {message}"
    if error is not None:
        line += f" ({type(error).__name__}: {error})"
    print(line, flush=True)
    try:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with LOG_FILE.open("a", encoding="utf-8") as f:
            f.write(line + os.linesep)
    except OSError:
        # Brak zapisu do pliku nie może wywrócić aplikacji
        pass
