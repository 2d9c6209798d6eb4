import os


def env_or_default(env_name: str, default_val: str) -> str:
    """環境変数 `env_name` が空でなければその値を、そうでなければ `default_val` を返す"""
    return os.environ.get(env_name) or default_val
