"""Users / posts / likes schema and its two access flavours (``orm`` and ``core``)."""
