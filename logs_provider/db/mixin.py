#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

from typing import Any, Dict, List


class Base:
    """shared helpers for the declarative models"""

    @classmethod
    def column_names(cls) -> List[str]:
        return [column.name for column in cls.__table__.columns]

    def to_dict(self) -> Dict[str, Any]:
        """column name -> value, in table column order"""
        return {name: getattr(self, name) for name in self.column_names()}

    def __repr__(self):
        # loaded attributes only, an expired instance must not trigger a refresh
        loaded = {k: v for k, v in vars(self).items() if not k.startswith("_")}
        fields = ", ".join(f"{k}={v!r}" for k, v in sorted(loaded.items()))
        return f"{type(self).__name__}({fields})"
