import os
import appdirs # type: ignore

config_dir : str = appdirs.user_config_dir("LocaleSync", "LocaleSync", roaming=True)

def GetConfigPath(*parts : str) -> str:
    """
    Path to a file in the per-user configuration directory
    """
    return os.path.join(config_dir, *parts)
