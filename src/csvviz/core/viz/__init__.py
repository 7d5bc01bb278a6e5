"""
Visualization outputs for csvviz.

- palette: chart color slots and assignment
- specs: render-ready chart specifications
- charts: chart builders turning a dataset and selection into a spec
"""
