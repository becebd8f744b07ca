"""
どこで: `util.utils`
何を: `configs/default.yaml` とルート `config.yaml` を読み、セクション単位で合成する。
なぜ: ページ既定値などを YAML で差し替えられるようにしつつ、読めなくてもスクリプトを止めないため。
"""

from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

DEFAULT_CONFIG = Path("configs") / "default.yaml"
USER_CONFIG = Path("config.yaml")


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """`start` から上へ辿り、`pyproject.toml` か `configs/` を持つ最初のディレクトリを返す。

    見つからなければ `start.parent.parent`（`<root>/src/util` を想定）。
    """
    cur = start.resolve()
    for parent in [cur, *cur.parents]:
        if (parent / "pyproject.toml").exists() or (parent / "configs").is_dir():
            return parent
    return cur.parent.parent


def _merge_sections(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    # 両方が辞書のセクションはキー単位で上書き。それ以外は丸ごと置き換え（1 段のみ）
    out = dict(base)
    for key, value in override.items():
        prev = out.get(key)
        if isinstance(prev, dict) and isinstance(value, dict):
            out[key] = {**prev, **value}
        else:
            out[key] = value
    return out


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（セクション内のキー単位で上書き）

    - いずれも存在しない/不正な場合は空辞書を返す。
    """
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    cfg = _safe_load_yaml(project_root / DEFAULT_CONFIG)
    user_path = project_root / USER_CONFIG
    if user_path.exists():
        cfg = _merge_sections(cfg, _safe_load_yaml(user_path))
    return cfg


def config_section(name: str, root: Path | None = None) -> Dict[str, Any]:
    """`load_config()` の 1 セクションを返す。無い/辞書でない場合は空辞書。"""
    section = load_config(root).get(name)
    return dict(section) if isinstance(section, dict) else {}


__all__ = ["load_config", "config_section"]
