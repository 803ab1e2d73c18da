"""
Service context for log lines.

Identifies which process produced a log line, e.g. ``marketplace-api@local_dev:4121``.
"""

from functools import lru_cache
import os
import socket


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'marketplace-api')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Containers get a random hostname, local runs are told apart by PID
    if os.getenv('CONTAINER_HOSTNAME_AS_ID', '').lower() in ('1', 'true'):
        instance_id = socket.gethostname()[:12]
    else:
        instance_id = str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance_id}'
