"""
labelconverter converts phoneme labels between lab files and Praat textgrids.

A lab file lists one phoneme per line with its start and end time in
100ns ticks.  A Praat TextGrid stores tiers of labelled intervals with
times in seconds.
Praat's homepage: [http://www.fon.hum.uva.nl/praat/](http://www.fon.hum.uva.nl/praat/)

**lab.py** reads and writes lab files.

**textgrid.py** reads and writes textgrids; the classes Textgrid,
IntervalTier and TextTier it exposes live in **data_classes/**.

**phone_dict.py** rewrites phoneme sequences with an ordered rule table,
optionally merging several phonemes into one.

**conversion.py** moves phonemes between the two formats, scaling the
timestamps and applying a phone dict along the way.
"""
