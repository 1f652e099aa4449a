"""
Service context extraction for logging.

Identifies which service, environment and process emitted a log line.
"""

from functools import lru_cache
import os


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'fleet-service')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    # Container hostname in deployments, PID for local development
    instance_id = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())
    return f'{service_name}@{deploy_env}:{instance_id}'
