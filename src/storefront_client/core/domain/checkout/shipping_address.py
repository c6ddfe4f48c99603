from dataclasses import dataclass, fields


@dataclass(frozen=True)
class ShippingAddress:
    street: str
    city: str
    state: str
    zip_code: str
    country: str

    def missing_fields(self) -> tuple[str, ...]:
        return tuple(f.name for f in fields(self) if not getattr(self, f.name).strip())

    def to_payload(self) -> dict[str, str]:
        return {
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "zipCode": self.zip_code,
            "country": self.country,
        }
