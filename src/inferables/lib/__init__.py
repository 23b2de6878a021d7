"""Generic variant machinery - base class, dispatch, Maybe and Either."""
