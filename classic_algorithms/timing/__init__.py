from .debounce import AsyncDebounced, Debounced, debounce, debounce_async
