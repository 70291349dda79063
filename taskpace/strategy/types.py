class StrategyError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnknownStrategyError(StrategyError):
    def __init__(self, name: str, known: list[str]):
        super().__init__(f"Unknown strategy: {name}\n Expected one of: {', '.join(known)}")
        self.name = name
