import pytest

from partition_engine import (
    AllocationStrategy,
    BestFitStrategy,
    Block,
    FirstFitStrategy,
    PartitionEngine,
    PlacementStrategy,
    StrategyRegistry,
)
from partition_engine.strategies import default_registry, resolve_strategy
from partition_engine.types import IPlacementStrategy


LAYOUT = (
    Block(None, 200),
    Block("A", 100),
    Block(None, 120),
    Block("B", 50),
    Block(None, 120),
    Block("C", 10),
    Block(None, 400),
)


class TestFirstFit:
    def setup_method(self):
        self.strategy = FirstFitStrategy()

    def test_lowest_address_wins(self):
        assert self.strategy.select(LAYOUT, 100) == 0
        assert self.strategy.select(LAYOUT, 200) == 0

    def test_skips_small_and_owned_blocks(self):
        assert self.strategy.select(LAYOUT, 201) == 6

    def test_no_fit(self):
        assert self.strategy.select(LAYOUT, 401) is None

    def test_owned_blocks_never_selected(self):
        assert self.strategy.select((Block("A", 500),), 10) is None


class TestBestFit:
    def setup_method(self):
        self.strategy = BestFitStrategy()

    def test_smallest_sufficient_block(self):
        assert self.strategy.select(LAYOUT, 150) == 0
        assert self.strategy.select(LAYOUT, 201) == 6

    def test_tie_goes_to_lowest_address(self):
        assert self.strategy.select(LAYOUT, 110) == 2

    def test_exact_size_preferred(self):
        layout = (Block(None, 300), Block("A", 1), Block(None, 64))
        assert self.strategy.select(layout, 64) == 2

    def test_no_fit(self):
        assert self.strategy.select(LAYOUT, 401) is None


class TestAllocationStrategyEnum:
    def test_label(self):
        assert AllocationStrategy.BEST_FIT.label == "best-fit"


class WorstFitStrategy(PlacementStrategy):
    name = "worst-fit"

    def select(self, blocks, size):
        best = None
        for i, block in self.candidates(blocks, size):
            if best is None or block.size > blocks[best].size:
                best = i
        return best


class TestRegistry:
    def test_default_registry_names(self):
        assert default_registry.names() == ["best-fit", "first-fit"]

    def test_resolve_enum_and_names(self):
        assert isinstance(resolve_strategy(AllocationStrategy.FIRST_FIT), FirstFitStrategy)
        assert isinstance(resolve_strategy("best"), BestFitStrategy)
        assert isinstance(resolve_strategy("Best_Fit"), BestFitStrategy)

    def test_instances_pass_through(self):
        strategy = BestFitStrategy()
        assert resolve_strategy(strategy) is strategy

    def test_resolve_rejects_other_types(self):
        with pytest.raises(TypeError):
            resolve_strategy(3.5)

    def test_register_requires_named_strategy(self):
        registry = StrategyRegistry()
        with pytest.raises(TypeError):
            registry.register(object())

    def test_builtins_satisfy_protocol(self):
        assert isinstance(FirstFitStrategy(), IPlacementStrategy)
        assert isinstance(BestFitStrategy(), IPlacementStrategy)

    def test_new_strategy_plugs_into_engine(self):
        registry = StrategyRegistry()
        registry.register(FirstFitStrategy(), "first")
        registry.register(WorstFitStrategy(), "worst")

        engine = PartitionEngine(total_memory=1000, default_strategy="worst", registry=registry)
        for pid, size in (("A", 100), ("B", 100), ("C", 500)):
            engine.allocate(pid, size, "first")
        engine.free("A")
        # [free 100, B 100, C 500, free 300]

        result = engine.allocate("D", 50)

        assert result.ok
        assert result.blocks[3] == Block("D", 50)
        assert "worst" in registry
        assert "worst" not in default_registry


class FixedIndexStrategy(PlacementStrategy):
    name = "fixed-index"

    def __init__(self, index):
        self.index = index

    def select(self, blocks, size):
        return self.index


class TestStrategyIndexChecks:
    def setup_method(self):
        self.engine = PartitionEngine(total_memory=100)

    def test_owned_block_is_refused(self):
        self.engine.allocate("A", 40)
        before = self.engine.current_blocks()

        with pytest.raises(ValueError, match="cannot hold"):
            self.engine.allocate("B", 10, FixedIndexStrategy(0))

        assert self.engine.current_blocks() == before

    def test_too_small_block_is_refused(self):
        self.engine.allocate("A", 90)
        before = self.engine.current_blocks()

        with pytest.raises(ValueError, match="cannot hold"):
            self.engine.allocate("B", 50, FixedIndexStrategy(1))

        assert self.engine.current_blocks() == before
        assert sum(b.size for b in before) == 100

    @pytest.mark.parametrize("index", [1, 5, -2])
    def test_out_of_range_index_is_refused(self, index):
        with pytest.raises(ValueError, match="out-of-range"):
            self.engine.allocate("A", 10, FixedIndexStrategy(index))

        assert self.engine.current_blocks() == (Block(None, 100),)

    @pytest.mark.parametrize("index", ["0", 0.0, True])
    def test_non_integer_index_is_refused(self, index):
        with pytest.raises(TypeError, match="non-integer"):
            self.engine.allocate("A", 10, FixedIndexStrategy(index))

        assert self.engine.current_blocks() == (Block(None, 100),)

    def test_valid_index_is_accepted(self):
        result = self.engine.allocate("A", 10, FixedIndexStrategy(0))

        assert result.ok
        assert result.blocks == (Block("A", 10), Block(None, 90))
