from typing import List

from loguru import logger

from mssh.config import MergedConfig

DEFAULT_SSH = ["ssh", "-t"]


def build_command(name: str, config: MergedConfig) -> List[str]:
    """
    Build the argv used to connect to ``name``.

    Direct hosts run their GatewayCommand (or ``ssh -t``) against the address.
    Hosts with ``Via`` ssh into the gateway and run
    ``"<GatewayCommand> <address>"`` there.
    """
    host = config.get(name)
    address = host.hostname or name

    ssh = host.gateway_command.split() or list(DEFAULT_SSH)

    if not host.via:
        cmds = ssh + [address]
    else:
        if not host.gateway_command.strip():
            logger.warning(f"{name} has Via '{host.via}' but no GatewayCommand")
        cmds = DEFAULT_SSH + [host.via, f"{host.gateway_command} {address}"]

    logger.info(f"{name}: {cmds}")
    return cmds
