from stripe_mock.core.store import InMemoryStore
from stripe_mock.models.plan import Plan
from stripe_mock.schemas.plan import PlanCreate


class PlanRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def get_all(self, skip: int = 0, limit: int = 100) -> list[Plan]:
        return list(self.store.plans.values())[skip : skip + limit]

    def get_by_id(self, plan_id: str) -> Plan | None:
        return self.store.plans.get(plan_id)

    def id_exists(self, plan_id: str) -> bool:
        return plan_id in self.store.plans

    def create(self, data: PlanCreate) -> Plan:
        fields = data.model_dump(exclude_none=True)
        fields["currency"] = data.currency.lower()
        plan = Plan(**fields)
        self.store.plans[plan.id] = plan
        return plan
