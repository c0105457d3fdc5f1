"""
ssm.py

AWS Systems Manager Parameter Store implementation of the parameter lookup
port.

Features:
- Batches GetParameters calls (at most 10 names per call)
- Decrypts SecureString values
- Strips "ssm:" / "ssm-secure:" tags before querying the store
- Wraps every client failure in StoreError

Usage:
    service = SsmParameterService(region="eu-west-1")
    resolution_map = service.fetch({"db/host", "ssm-secure:db/password"})
"""

from collections import defaultdict
from typing import Any, Iterator, Optional
import boto3
from botocore.exceptions import BotoCoreError, ClientError
from ssmresolve.config.settings import SSM_MAX_BATCH
from ssmresolve.exceptions import StoreError
from ssmresolve.lib.log import LOG
from ssmresolve.lib.lookup import reference_toName
from ssmresolve.models.dataModel import ParameterInfo, ResolutionMap


def names_batch(names: list[str], size: int) -> Iterator[list[str]]:
    """Yield consecutive slices of `names` holding at most `size` items."""
    for start in range(0, len(names), size):
        yield names[start : start + size]


class SsmParameterService:
    """Parameter lookup backed by AWS SSM Parameter Store."""

    def __init__(
        self,
        client: Optional[Any] = None,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        batch_size: int = SSM_MAX_BATCH,
    ) -> None:
        """
        Initialize the service.

        Args:
            client: A boto3 SSM client; one is created when omitted
            region: AWS region for a created client
            endpoint_url: Endpoint override for a created client
            batch_size: Names per GetParameters call, between 1 and 10

        Raises:
            ValueError: If batch_size is out of range
        """
        if not 1 <= batch_size <= SSM_MAX_BATCH:
            raise ValueError(f"batch_size must be between 1 and {SSM_MAX_BATCH}")

        self.batch_size: int = batch_size
        self.region: Optional[str] = region
        self.endpoint_url: Optional[str] = endpoint_url
        self._client: Optional[Any] = client

    @property
    def client(self) -> Any:
        """The boto3 SSM client, created on first use.

        Raises:
            StoreError: If no client can be created (e.g. no region configured)
        """
        if self._client is None:
            try:
                self._client = boto3.client(
                    "ssm", region_name=self.region, endpoint_url=self.endpoint_url
                )
            except BotoCoreError as e:
                raise StoreError(f"Failed to create SSM client: {e}") from e
        return self._client

    def parameters_get(self, names: list[str]) -> dict[str, Any]:
        """
        Run one GetParameters call.

        Args:
            names: Store names, at most `batch_size` of them

        Returns:
            The raw GetParameters response

        Raises:
            StoreError: If the client call fails
        """
        try:
            return self.client.get_parameters(Names=names, WithDecryption=True)
        except (ClientError, BotoCoreError) as e:
            LOG(f"GetParameters failed for {names}: {e}")
            raise StoreError(f"Failed to get parameters {names}: {e}") from e

    def fetch(self, references: set[str]) -> ResolutionMap:
        """
        Resolve references against the parameter store.

        Args:
            references: Unique parameter references

        Returns:
            Mapping of every reference to its ParameterInfo

        Raises:
            StoreError: If the store fails or any reference does not exist
        """
        references_byName: dict[str, set[str]] = defaultdict(set)
        for reference in references:
            references_byName[reference_toName(reference)].add(reference)

        names: list[str] = sorted(references_byName)
        resolved: ResolutionMap = {}
        invalid: list[str] = []

        for batch in names_batch(names, self.batch_size):
            LOG(f"Fetching {len(batch)} parameter(s) from SSM")
            response: dict[str, Any] = self.parameters_get(batch)
            invalid.extend(response.get("InvalidParameters", []))

            for parameter in response.get("Parameters", []):
                info: ParameterInfo = ParameterInfo(
                    name=parameter["Name"],
                    value=parameter["Value"],
                    type=parameter["Type"],
                )
                for reference in references_byName.get(info.name, ()):
                    resolved[reference] = info

        if invalid:
            raise StoreError(f"Invalid parameters: {sorted(invalid)}")

        missing: list[str] = sorted(set(references) - set(resolved))
        if missing:
            raise StoreError(f"Parameters not returned by the store: {missing}")

        return resolved
