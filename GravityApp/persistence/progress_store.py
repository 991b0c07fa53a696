from __future__ import annotations
from pathlib import Path
from typing import Iterable, Optional
import datetime as _dt
import json
import os
import shutil

from kivy.logger import Logger

from GravityApp.config import PROGRESS_KEY

class ProgressStore:
    """Learned word indices, kept in memory and mirrored to a JSON file.

    The file holds one object with a single entry, ``{PROGRESS_KEY: [..]}``.
    Writes go through a temp file and ``os.replace`` so readers never see a
    half-written list.
    """

    def __init__(self, path: Path, key: str = PROGRESS_KEY, catalog_size: Optional[int] = None):
        self.path = Path(path)
        self.key = key
        self.catalog_size = catalog_size
        self._order: list[int] = []
        self._members: set[int] = set()

    @property
    def learned(self) -> list[int]:
        return list(self._order)

    def __contains__(self, index) -> bool:
        return index in self._members

    def __len__(self) -> int:
        return len(self._order)

    # ---- Snapshot parse ----
    def _parse(self, raw) -> list[int]:
        if not isinstance(raw, list) or not all(
            isinstance(i, int) and not isinstance(i, bool) and i >= 0 for i in raw
        ):
            raise ValueError(f"{self.key!r} is not a list of word indices")
        if self.catalog_size is not None:
            dropped = [i for i in raw if i >= self.catalog_size]
            if dropped:
                Logger.warning(f"Progress: ignoring {len(dropped)} indices beyond the catalog")
            raw = [i for i in raw if i < self.catalog_size]
        seen, out = set(), []
        for i in raw:
            if i not in seen:
                seen.add(i)
                out.append(i)
        return out

    def _apply(self, items: Iterable[int]):
        self._order = list(items)
        self._members = set(self._order)

    # ---- IO ----
    def load(self) -> list[int]:
        self._apply([])
        if not self.path.exists():
            Logger.info(f"Progress: no saved progress at {self.path}, starting fresh")
            return self.learned
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("progress file is not a JSON object")
            self._apply(self._parse(data.get(self.key, [])))
        except (OSError, ValueError) as e:
            # malformed state counts as "nothing learned yet"
            Logger.warning(f"Progress: unreadable progress file {self.path}: {e}")
            self._apply([])
        Logger.info(f"Progress: {len(self)} learned words loaded")
        return self.learned

    def _write(self, items: list[int]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump({self.key: items}, f, separators=(",", ":"))
        os.replace(tmp_path, self.path)

    def save(self, learned: Optional[Iterable[int]] = None):
        items = self._order if learned is None else self._parse(list(learned))
        self._write(items)
        self._apply(items)

    def mark_learned(self, index: int) -> bool:
        if index in self._members:
            return False
        # memory only changes once the file is written
        self._write(self._order + [index])
        self._order.append(index)
        self._members.add(index)
        Logger.debug(f"Progress: word {index} learned ({len(self)} total)")
        return True

    # ---- Backups ----
    def _canonical_str(self, o) -> str:
        return json.dumps(o, separators=(",", ":"), sort_keys=True)

    def backup_if_changed(self) -> Optional[Path]:
        path = self.path
        if not path.exists():
            return None
        backup_dir = path.with_name("back_ups")
        backup_dir.mkdir(parents=True, exist_ok=True)
        pattern = f"{path.stem}_*{path.suffix}"
        candidates = sorted(backup_dir.glob(pattern), key=lambda p: p.stat().st_mtime)
        last_backup = candidates[-1] if candidates else None

        current_str = self._canonical_str({self.key: self._order})
        prev_str = None
        if last_backup is not None:
            try:
                with open(last_backup, "r", encoding="utf-8") as f:
                    prev_str = self._canonical_str(json.load(f))
            except (OSError, ValueError):
                prev_str = None
        if prev_str == current_str:
            return None
        ts = _dt.datetime.now().strftime("%Y-%m-%d_%H-%M-%S-%f")
        backup = backup_dir / f"{path.stem}_{ts}{path.suffix}"
        shutil.copy2(path, backup)
        Logger.info(f"Progress: backup written to {backup.name}")
        return backup
