import os
import yaml
from .config import EngineConfig

_ENV_OVERRIDES = {
    'LEXEMO_LEXICON_PATH': 'lexicon_path',
    'LEXEMO_HISTORY_PATH': 'history_path',
}
_TRUE = {'1', 'true', 'yes', 'y', 'on'}
_FALSE = {'0', 'false', 'no', 'n', 'off'}


def _parse_flag(
    value,
    default: bool,
) -> bool:
    if isinstance(
        value,
        str,
    ):
        v = value.strip().lower()
        if v in _TRUE:
            return True
        if v in _FALSE:
            return False
        return bool(default)
    return bool(value)


def _coerce_field(
    default,
    value,
):
    # tables accept a comma list for negators/emotions, mappings stay mappings
    if value is None:
        return default if isinstance(
            default,
            (list, dict),
        ) else None
    if isinstance(
        default,
        bool,
    ):
        return _parse_flag(
            value,
            default,
        )
    if isinstance(
        default,
        int,
    ):
        return int(str(value).strip())
    if isinstance(
        default,
        list,
    ):
        if isinstance(
            value,
            str,
        ):
            return [s.strip() for s in value.split(',') if s.strip()]
        return [str(v) for v in value]
    if isinstance(
        default,
        dict,
    ):
        if not isinstance(
            value,
            dict,
        ):
            raise ValueError('error: ValueError')
        return {str(k): str(v) for k, v in value.items()}
    return str(value)


def _apply_env_overrides(setup: EngineConfig) -> EngineConfig:
    for env_name, attr in _ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw is None or not raw.strip():
            continue
        setattr(
            setup,
            attr,
            raw.strip(),
        )
    if os.environ.get('LEXEMO_EMOTION_FALLBACK') is not None:
        setup.emotion_fallback = _env_flag(
            'LEXEMO_EMOTION_FALLBACK',
            setup.emotion_fallback,
        )
    return setup


def load_config(path: str | None = None) -> EngineConfig:
    setup = EngineConfig()
    if not path:
        return _apply_env_overrides(setup)
    with open(
        path,
        'r',
        encoding='utf-8',
    ) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(
        data,
        dict,
    ):
        raise ValueError('error: ValueError')
    for k, v in data.items():
        if hasattr(
            setup,
            k,
        ):
            default = getattr(
                setup,
                k,
            )
            setattr(
                setup,
                k,
                _coerce_field(
                    default,
                    v,
                ),
            )
    return _apply_env_overrides(setup)


def _env_flag(
    name: str,
    default: bool = False,
) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return bool(default)
    return _parse_flag(
        raw,
        default,
    )
