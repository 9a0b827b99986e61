"""Domain layer for fundreport: report sections, aggregation and assembly."""
