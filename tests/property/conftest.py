"""Hypothesis strategies for property-based testing."""

from hypothesis import strategies as st

from vidingest.models.stages import Stage, StageTable


@st.composite
def generate_stage_table(draw, max_stages=8):
    """Generate a random valid StageTable with integer durations."""
    durations = draw(
        st.lists(st.integers(min_value=1, max_value=5000), min_size=1, max_size=max_stages)
    )
    return StageTable(
        [Stage(key=f"s{i}", label=f"Stage {i}", duration_ms=d) for i, d in enumerate(durations)]
    )


@st.composite
def generate_actions(draw, max_actions=60):
    """Generate a run script: time advances interleaved with pause/resume toggles."""
    return draw(
        st.lists(
            st.one_of(
                st.tuples(st.just("advance"), st.integers(min_value=0, max_value=4000)),
                st.tuples(st.just("pause"), st.just(0)),
                st.tuples(st.just("resume"), st.just(0)),
            ),
            max_size=max_actions,
        )
    )
