"""Render nodes that transform, clip, extrapolate, composite, sequence, blur and chroma-subsample other renders."""