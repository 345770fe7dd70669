from __future__ import annotations

import logging

from fastapi import HTTPException

from emotion_weather.models.policy import Policy, PolicyCreate, PolicyStatus, PolicyUpdate
from emotion_weather.repositories.data_store import DataStore
from emotion_weather.services.activity_service import ActivityLog

logger = logging.getLogger(__name__)


class PolicyService:
    def __init__(self, store: DataStore, activity_log: ActivityLog) -> None:
        self.store = store
        self.activity_log = activity_log

    def list_policies(self) -> list[Policy]:
        return self.store.list_policies()

    def get_policy(self, policy_id: str) -> Policy:
        policy = self.store.get_policy(policy_id)
        if policy is None:
            raise HTTPException(status_code=404, detail="Policy not found")
        return policy

    def current_policy(self) -> Policy:
        """First active policy in newest-first order."""
        policy = next(
            (p for p in self.store.list_policies() if p.status == PolicyStatus.ACTIVE),
            None,
        )
        if policy is None:
            raise HTTPException(status_code=404, detail="No active policy found")
        return policy

    def create_policy(self, payload: PolicyCreate) -> Policy:
        policy = self.store.create_policy(payload)
        logger.info("Policy created: %s (%s)", policy.id, policy.status.value)
        self.activity_log.log_event(
            event_type="policy_created",
            details={"policy_id": policy.id, "title": policy.title, "status": policy.status.value},
        )
        return policy

    def update_policy(self, policy_id: str, patch: PolicyUpdate) -> Policy:
        policy = self.store.update_policy(policy_id, patch)
        if policy is None:
            raise HTTPException(status_code=404, detail="Policy not found")

        changed = sorted(patch.changes())
        logger.info("Policy updated: %s fields=%s", policy_id, changed)
        self.activity_log.log_event(
            event_type="policy_updated",
            details={"policy_id": policy_id, "fields": changed},
        )
        return policy

    def delete_policy(self, policy_id: str) -> None:
        if not self.store.delete_policy(policy_id):
            raise HTTPException(status_code=404, detail="Policy not found")

        logger.info("Policy deleted: %s", policy_id)
        self.activity_log.log_event(event_type="policy_deleted", details={"policy_id": policy_id})
