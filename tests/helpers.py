from dataclasses import dataclass, field


@dataclass
class Customer:
    id: int | None
    name: str | None

    def __str__(self):
        return self.name if self.name is not None else ""


@dataclass
class CustomerToString:
    """Formats a customer and records every formatted value."""

    names: list = field(default_factory=list)

    def __call__(self, customer):
        text = ""
        if customer is not None:
            if customer.id is not None:
                text += f"({customer.id}) "
            text += f'"{customer.name or ""}"'
        self.names.append(text)
        return text


def customer_like(name):
    return lambda customer: name in str(customer)


@dataclass
class CountingPredicate:
    predicate: object
    calls: int = 0

    def __call__(self, item):
        self.calls += 1
        return self.predicate(item)
