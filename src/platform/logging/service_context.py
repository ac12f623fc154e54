"""
Service context extraction for logging.

Tags every log line with service name, deploy environment and a short
instance id (container id when running in a container, PID otherwise).
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'storefront')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # HOSTNAME is the container id under Docker / Kubernetes
    instance_id = os.getenv('HOSTNAME', '')[:12] if os.getenv('CONTAINER') else ''
    if not instance_id:
        instance_id = str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance_id}'
