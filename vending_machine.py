"""
Price Lookup Vending Machine

Looks up the price of the requested item, compares it against the money
tendered and reports the result: exact dispense, dispense with change,
or not dispensed with a suggestion of what the money can buy instead.
"""

from types import MappingProxyType


TESTING = False

def log(s):
    if TESTING:
        print(f"{s}\n")


class Outcome(object):
    _NAME = ""
    def __init__(self):
        pass
    @property
    def name(self):
        return self._NAME
    def message(self):
        return ""

class DispensedOutcome(Outcome):
    """Exact money, nothing to return."""
    _NAME = "dispensed"
    def message(self):
        return "Item dispensed."

class ChangeOutcome(Outcome):
    _NAME = "dispensed_with_change"

    def __init__(self, change):
        self.change = change

    def message(self):
        return f"Item dispensed and change of {self.change} returned."

class InsufficientOutcome(Outcome):
    """Not enough money. Lists the items that could be bought instead."""
    _NAME = "insufficient"

    def __init__(self, missing, suggestions):
        self.missing = missing
        self.suggestions = list(suggestions)

    def message(self):
        if self.suggestions:
            suggestion = f"Can purchase {' or '.join(self.suggestions)}."
        else:
            suggestion = "Cannot purchase item."
        return f"Item not dispensed, missing {self.missing}. {suggestion}"


class VendingMachine(object):
    # read-only; order is the suggestion order
    PRODUCTS = MappingProxyType({"candy": 20,
                                 "coke": 25,
                                 "coffee": 45,
                                 })

    def cost_of(self, item):
        """Price of item, or 0 when the machine does not stock it."""
        return self.PRODUCTS.get(item, 0)

    def affordable(self, money):
        return [name for name, price in self.PRODUCTS.items() if price <= money]

    def classify(self, money, item):
        cost = self.cost_of(item)
        if money == cost:
            outcome = DispensedOutcome()
        elif money > cost:
            outcome = ChangeOutcome(money - cost)
        else:
            outcome = InsufficientOutcome(cost - money, self.affordable(money))
        log(f"{item!r}: cost {cost}, money {money} -> {outcome.name}")
        return outcome

    def dispense_item(self, money, item):
        return self.classify(money, item).message()


_machine = VendingMachine()

def dispense(money, item):
    """Return the outcome message for buying item with money."""
    return _machine.dispense_item(money, item)
