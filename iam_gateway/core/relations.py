"""Relation service: ReBAC relation tuples and access queries."""
from __future__ import annotations
import logging
from typing import List

from .management import ManagementClient
from .models import RelationTuple

logger = logging.getLogger(__name__)


def _to_tuples(relations: List[dict]) -> List[RelationTuple]:
    return [RelationTuple.from_dict(relation) for relation in relations or []]


class RelationService:
    """Service for managing relation tuples.
    
    Duplicate and missing-tuple semantics are left to the remote platform.
    """
    
    def __init__(self, client: ManagementClient):
        self.client = client
    
    def create_relations(self, tuples: List[RelationTuple]) -> None:
        logger.info("Creating %d relation tuple(s)", len(tuples))
        self.client.create_relations([t.to_dict() for t in tuples])
        logger.info("Successfully created %d relation tuple(s)", len(tuples))
    
    def delete_relations(self, tuples: List[RelationTuple]) -> None:
        logger.info("Deleting %d relation tuple(s)", len(tuples))
        self.client.delete_relations([t.to_dict() for t in tuples])
        logger.info("Successfully deleted %d relation tuple(s)", len(tuples))
    
    def who_can_access(self, resource: str, relation_definition: str, namespace: str) -> List[str]:
        """Targets holding relation_definition on resource within namespace."""
        logger.info(
            "Querying who can access resource: %s with relation: %s in namespace: %s",
            resource,
            relation_definition,
            namespace,
        )
        targets = list(self.client.who_can_access(resource, relation_definition, namespace) or [])
        logger.info("Found %d target(s) that can access the resource", len(targets))
        return targets
    
    def get_resource_relations(self, resource_id: str) -> List[RelationTuple]:
        logger.info("Getting relations for resource: %s", resource_id)
        tuples = _to_tuples(self.client.resource_relations(resource_id))
        logger.info("Found %d relation(s) for resource", len(tuples))
        return tuples
    
    def get_target_access(self, target_id: str) -> List[RelationTuple]:
        """Relations through which target_id can access resources."""
        logger.info("Getting access for target: %s", target_id)
        tuples = _to_tuples(self.client.target_relations(target_id))
        logger.info("Found %d relation(s) for target", len(tuples))
        return tuples
