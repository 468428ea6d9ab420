from stripe_mock.core.store import InMemoryStore
from stripe_mock.models.coupon import Coupon
from stripe_mock.schemas.coupon import CouponCreate


class CouponRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def get_all(self, skip: int = 0, limit: int = 100) -> list[Coupon]:
        return list(self.store.coupons.values())[skip : skip + limit]

    def get_by_id(self, coupon_id: str) -> Coupon | None:
        return self.store.coupons.get(coupon_id)

    def id_exists(self, coupon_id: str) -> bool:
        return coupon_id in self.store.coupons

    def create(self, data: CouponCreate) -> Coupon:
        fields = data.model_dump(exclude_none=True)
        if data.currency:
            fields["currency"] = data.currency.lower()
        coupon = Coupon(**fields)
        self.store.coupons[coupon.id] = coupon
        return coupon

    def redeem(self, coupon: Coupon) -> Coupon:
        coupon.times_redeemed += 1
        return coupon
