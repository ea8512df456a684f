"""Language specs: keywords and function definers, and lookup by name."""