"""
AWS ECS Task Launcher for the lobby control plane.

Starts one Fargate task per lobby. Handles ECS API errors and classifies
them as transient or permanent. Contains no lobby state logic - purely
orchestration API interaction.
"""

import hashlib
import logging
from typing import Any, Dict, List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError, ClientError, ConnectTimeoutError,
    EndpointConnectionError, ReadTimeoutError
)

from lobby.errors import LaunchError
from .base import TaskLauncher

logger = logging.getLogger(__name__)

TRANSIENT_ERROR_CODES = {
    'ThrottlingException',
    'ServerException',
    'ServiceUnavailableException',
    'RequestLimitExceeded',
}


def idempotency_token(reference_id: str) -> str:
    """
    Derive the ECS clientToken for a lobby.

    ECS accepts at most 64 letters, digits, hyphens and underscores, so the
    opaque reference id is hashed rather than used directly.
    """
    return hashlib.sha256(reference_id.encode('utf-8')).hexdigest()


class EcsTaskLauncher(TaskLauncher):
    """
    ECS client wrapper that runs the lobby server task definition.

    The reference id is handed to the container through the REFERENCE_ID
    environment variable and doubles as the RunTask idempotency token.
    """

    def __init__(self, cluster: str, task_definition: str, container_name: str,
                 subnets: Optional[List[str]] = None,
                 security_groups: Optional[List[str]] = None,
                 assign_public_ip: str = 'ENABLED',
                 region: str = 'us-east-1',
                 connect_timeout: float = 5,
                 read_timeout: float = 10,
                 client: Any = None):
        """
        Initialize the ECS launcher.

        Args:
            cluster: ECS cluster name or ARN
            task_definition: Task definition family or ARN
            container_name: Container receiving the environment overrides
            subnets: VPC subnets for the task ENI
            security_groups: Security groups for the task ENI
            assign_public_ip: ENABLED or DISABLED
            region: AWS region
            connect_timeout: Seconds to wait for a connection
            read_timeout: Seconds to wait for a response
            client: Pre-built boto3 ECS client
        """
        self.cluster = cluster
        self.task_definition = task_definition
        self.container_name = container_name
        self.subnets = subnets or []
        self.security_groups = security_groups or []
        self.assign_public_ip = assign_public_ip

        if client is None:
            # No SDK retries; retry policy belongs to callers
            client = boto3.client(
                'ecs',
                region_name=region,
                config=Config(
                    connect_timeout=connect_timeout,
                    read_timeout=read_timeout,
                    retries={'max_attempts': 1, 'mode': 'standard'}
                )
            )
        self.client = client
        logger.info(f"ECS launcher ready for cluster {cluster}, task definition {task_definition}")

    def build_run_task_request(self, reference_id: str,
                               parameters: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """Build the RunTask arguments for a lobby."""
        token = idempotency_token(reference_id)

        environment = [{'name': 'REFERENCE_ID', 'value': reference_id}]
        for name, value in (parameters or {}).items():
            environment.append({'name': name, 'value': str(value)})

        return {
            'cluster': self.cluster,
            'taskDefinition': self.task_definition,
            'launchType': 'FARGATE',
            'count': 1,
            'clientToken': token,
            'startedBy': f"lobby-{token[:32]}",
            'networkConfiguration': {
                'awsvpcConfiguration': {
                    'subnets': self.subnets,
                    'securityGroups': self.security_groups,
                    'assignPublicIp': self.assign_public_ip
                }
            },
            'overrides': {
                'containerOverrides': [{
                    'name': self.container_name,
                    'environment': environment
                }]
            },
            'tags': [{'key': 'referenceID', 'value': reference_id}]
        }

    def launch(self, reference_id: str, parameters: Optional[Dict[str, str]] = None) -> str:
        request = self.build_run_task_request(reference_id, parameters)

        try:
            response = self.client.run_task(**request)
        except ClientError as e:
            code = e.response.get('Error', {}).get('Code', 'Unknown')
            transient = code in TRANSIENT_ERROR_CODES
            logger.error(f"ECS run_task rejected for lobby {reference_id}: {code} (transient={transient})")
            raise LaunchError(f"ECS rejected task launch: {code}", transient=transient) from e
        except (ConnectTimeoutError, ReadTimeoutError, EndpointConnectionError) as e:
            logger.error(f"ECS unreachable while launching lobby {reference_id}: {e}")
            raise LaunchError("ECS did not respond", transient=True) from e
        except BotoCoreError as e:
            logger.error(f"ECS client error launching lobby {reference_id}: {e}")
            raise LaunchError(f"ECS client error: {e}") from e

        tasks = response.get('tasks') or []
        if not tasks:
            failures = response.get('failures') or []
            reasons = ', '.join(f.get('reason', 'unknown') for f in failures) or 'no task returned'
            logger.error(f"ECS returned no task for lobby {reference_id}: {reasons}")
            raise LaunchError(f"ECS did not start a task: {reasons}")

        task_arn = tasks[0]['taskArn']
        logger.info(f"ECS task started for lobby {reference_id} with arn {task_arn}")
        return task_arn
