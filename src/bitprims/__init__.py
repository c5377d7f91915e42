"""bitprims: fixed-width bit-manipulation primitives."""
