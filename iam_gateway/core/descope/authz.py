"""Descope ReBAC (fine-grained authorization) relation operations."""
from __future__ import annotations
from typing import List

from .client import (
    DescopeClient,
    RELATIONS_CREATE_PATH,
    RELATIONS_DELETE_PATH,
    RELATIONS_RESOURCE_PATH,
    RELATIONS_TARGETS_PATH,
    RELATIONS_WHO_PATH,
)


class AuthzManagement:
    """Service for managing relation tuples.
    
    Relations travel as wire dicts:
    ``{"resource", "relationDefinition", "namespace", "target"}``.
    """
    
    def __init__(self, client: DescopeClient):
        self.client = client
    
    def create_relations(self, relations: List[dict]) -> None:
        self.client.post(RELATIONS_CREATE_PATH, json={"relations": relations})
    
    def delete_relations(self, relations: List[dict]) -> None:
        self.client.post(RELATIONS_DELETE_PATH, json={"relations": relations})
    
    def who_can_access(self, resource: str, relation_definition: str, namespace: str) -> List[str]:
        """Return targets holding relation_definition on resource in namespace."""
        payload = {
            "resource": resource,
            "relationDefinition": relation_definition,
            "namespace": namespace,
        }
        body = self.client.post(RELATIONS_WHO_PATH, json=payload)
        return body.get("targets") or []
    
    def resource_relations(self, resource: str) -> List[dict]:
        body = self.client.post(RELATIONS_RESOURCE_PATH, json={"resource": resource})
        return body.get("relations") or []
    
    def target_relations(self, target: str) -> List[dict]:
        """Return every relation in which target is the subject."""
        body = self.client.post(RELATIONS_TARGETS_PATH, json={"targets": [target]})
        return body.get("relations") or []
