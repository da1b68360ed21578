"""Bunk v1 precomputed syllable trie.

Generated by ``python -m bunk.lexicon.build`` from the syllable table.
Do not edit by hand.

Each entry is ``(value, letters, first_child)``:
  value        byte whose syllable equals this node's prefix, or -1
  letters      outgoing transitions, sorted
  first_child  arena index of the child for letters[0], or -1 for a leaf;
               the child for letters[k] is at first_child + k
"""

# fmt: off
ARENA: tuple[tuple[int, str, int], ...] = (
    (-1, "abcdefgilmnopqrstuvy", 1),  # 0 (root)
    (0, "eilmnrstu", 21),  # 1 a
    (-1, "aeioruy", 30),  # 2 b
    (-1, "aeiloruy", 37),  # 3 c
    (-1, "aeioruy", 45),  # 4 d
    (1, "ailmnrstux", 52),  # 5 e
    (-1, "aeiloruy", 62),  # 6 f
    (-1, "aeioru", 70),  # 7 g
    (2, "aelmnorst", 76),  # 8 i
    (-1, "aeiouy", 85),  # 9 l
    (-1, "aeiouy", 91),  # 10 m
    (-1, "aeiouy", 97),  # 11 n
    (3, "aeilmnrstu", 103),  # 12 o
    (-1, "aehiloruy", 113),  # 13 p
    (-1, "u", 122),  # 14 q
    (-1, "aeiouy", 123),  # 15 r
    (-1, "aeiotuy", 129),  # 16 s
    (-1, "aehioruy", 136),  # 17 t
    (4, "aeilmnrst", 144),  # 18 u
    (-1, "aeiou", 153),  # 19 v
    (5, "", -1),  # 20 y
    (6, "", -1),  # 21 ae
    (7, "", -1),  # 22 ai
    (98, "", -1),  # 23 al
    (99, "", -1),  # 24 am
    (100, "", -1),  # 25 an
    (101, "", -1),  # 26 ar
    (102, "", -1),  # 27 as
    (103, "", -1),  # 28 at
    (8, "", -1),  # 29 au
    (22, "r", 158),  # 30 ba
    (23, "r", 159),  # 31 be
    (24, "l", 160),  # 32 bi
    (25, "n", 161),  # 33 bo
    (-1, "aeio", 162),  # 34 br
    (26, "s", 166),  # 35 bu
    (87, "", -1),  # 36 by
    (27, "l", 167),  # 37 ca
    (28, "n", 168),  # 38 ce
    (29, "", -1),  # 39 ci
    (-1, "aeio", 169),  # 40 cl
    (30, "r", 173),  # 41 co
    (-1, "aeio", 174),  # 42 cr
    (31, "m", 178),  # 43 cu
    (88, "", -1),  # 44 cy
    (32, "n", 179),  # 45 da
    (33, "l", 180),  # 46 de
    (34, "s", 181),  # 47 di
    (35, "r", 182),  # 48 do
    (-1, "aeio", 183),  # 49 dr
    (36, "m", 187),  # 50 du
    (89, "", -1),  # 51 dy
    (9, "", -1),  # 52 ea
    (10, "", -1),  # 53 ei
    (104, "", -1),  # 54 el
    (105, "", -1),  # 55 em
    (106, "", -1),  # 56 en
    (107, "", -1),  # 57 er
    (108, "", -1),  # 58 es
    (109, "", -1),  # 59 et
    (11, "", -1),  # 60 eu
    (129, "", -1),  # 61 ex
    (37, "l", 188),  # 62 fa
    (38, "r", 189),  # 63 fe
    (39, "n", 190),  # 64 fi
    (-1, "aeio", 191),  # 65 fl
    (40, "r", 195),  # 66 fo
    (-1, "aeio", 196),  # 67 fr
    (41, "l", 200),  # 68 fu
    (90, "", -1),  # 69 fy
    (42, "r", 201),  # 70 ga
    (43, "n", 202),  # 71 ge
    (44, "l", 203),  # 72 gi
    (45, "n", 204),  # 73 go
    (-1, "aeio", 205),  # 74 gr
    (46, "s", 209),  # 75 gu
    (12, "", -1),  # 76 ia
    (13, "", -1),  # 77 ie
    (110, "", -1),  # 78 il
    (111, "", -1),  # 79 im
    (236, "", -1),  # 80 in
    (14, "", -1),  # 81 io
    (113, "", -1),  # 82 ir
    (114, "", -1),  # 83 is
    (115, "", -1),  # 84 it
    (47, "m", 210),  # 85 la
    (48, "n", 211),  # 86 le
    (49, "n", 212),  # 87 li
    (50, "r", 213),  # 88 lo
    (51, "m", 214),  # 89 lu
    (91, "", -1),  # 90 ly
    (52, "l", 215),  # 91 ma
    (53, "n", 216),  # 92 me
    (54, "l", 217),  # 93 mi
    (55, "r", 218),  # 94 mo
    (56, "l", 219),  # 95 mu
    (92, "", -1),  # 96 my
    (57, "m", 220),  # 97 na
    (58, "l", 221),  # 98 ne
    (59, "m", 222),  # 99 ni
    (60, "r", 223),  # 100 no
    (61, "m", 224),  # 101 nu
    (93, "", -1),  # 102 ny
    (15, "", -1),  # 103 oa
    (16, "", -1),  # 104 oe
    (17, "", -1),  # 105 oi
    (116, "", -1),  # 106 ol
    (117, "", -1),  # 107 om
    (163, "", -1),  # 108 on
    (119, "", -1),  # 109 or
    (120, "", -1),  # 110 os
    (121, "", -1),  # 111 ot
    (18, "s", 225),  # 112 ou
    (62, "n", 226),  # 113 pa
    (63, "r", 227),  # 114 pe
    (-1, "aeio", 228),  # 115 ph
    (64, "l", 232),  # 116 pi
    (-1, "aeio", 233),  # 117 pl
    (65, "l", 237),  # 118 po
    (-1, "aeio", 238),  # 119 pr
    (66, "s", 242),  # 120 pu
    (94, "", -1),  # 121 py
    (-1, "aeio", 243),  # 122 qu
    (67, "m", 247),  # 123 ra
    (68, "n", 248),  # 124 re
    (161, "l", 249),  # 125 ri
    (215, "n", 250),  # 126 ro
    (71, "m", 251),  # 127 ru
    (162, "", -1),  # 128 ry
    (72, "l", 252),  # 129 sa
    (73, "n", 253),  # 130 se
    (74, "lov", 254),  # 131 si
    (75, "ln", 257),  # 132 so
    (-1, "aeio", 259),  # 133 st
    (76, "m", 263),  # 134 su
    (96, "", -1),  # 135 sy
    (77, "l", 264),  # 136 ta
    (78, "n", 265),  # 137 te
    (-1, "aeio", 266),  # 138 th
    (79, "lov", 270),  # 139 ti
    (80, "r", 273),  # 140 to
    (-1, "aeio", 274),  # 141 tr
    (81, "m", 278),  # 142 tu
    (97, "", -1),  # 143 ty
    (19, "", -1),  # 144 ua
    (20, "", -1),  # 145 ue
    (21, "", -1),  # 146 ui
    (122, "", -1),  # 147 ul
    (123, "", -1),  # 148 um
    (124, "", -1),  # 149 un
    (125, "", -1),  # 150 ur
    (126, "", -1),  # 151 us
    (127, "", -1),  # 152 ut
    (82, "l", 279),  # 153 va
    (83, "n", 280),  # 154 ve
    (84, "l", 281),  # 155 vi
    (85, "r", 282),  # 156 vo
    (86, "s", 283),  # 157 vu
    (130, "", -1),  # 158 bar
    (131, "", -1),  # 159 ber
    (132, "", -1),  # 160 bil
    (133, "", -1),  # 161 bon
    (194, "", -1),  # 162 bra
    (195, "", -1),  # 163 bre
    (196, "", -1),  # 164 bri
    (197, "", -1),  # 165 bro
    (134, "", -1),  # 166 bus
    (135, "", -1),  # 167 cal
    (136, "", -1),  # 168 cen
    (198, "", -1),  # 169 cla
    (199, "", -1),  # 170 cle
    (200, "", -1),  # 171 cli
    (201, "", -1),  # 172 clo
    (137, "", -1),  # 173 cor
    (202, "", -1),  # 174 cra
    (203, "", -1),  # 175 cre
    (204, "", -1),  # 176 cri
    (205, "", -1),  # 177 cro
    (138, "", -1),  # 178 cum
    (139, "", -1),  # 179 dan
    (140, "", -1),  # 180 del
    (141, "", -1),  # 181 dis
    (142, "", -1),  # 182 dor
    (206, "", -1),  # 183 dra
    (207, "", -1),  # 184 dre
    (208, "", -1),  # 185 dri
    (209, "", -1),  # 186 dro
    (143, "", -1),  # 187 dum
    (144, "", -1),  # 188 fal
    (145, "", -1),  # 189 fer
    (146, "", -1),  # 190 fin
    (210, "", -1),  # 191 fla
    (211, "", -1),  # 192 fle
    (212, "", -1),  # 193 fli
    (213, "", -1),  # 194 flo
    (147, "", -1),  # 195 for
    (214, "", -1),  # 196 fra
    (70, "", -1),  # 197 fre
    (216, "", -1),  # 198 fri
    (217, "", -1),  # 199 fro
    (148, "", -1),  # 200 ful
    (149, "", -1),  # 201 gar
    (150, "", -1),  # 202 gen
    (151, "", -1),  # 203 gil
    (152, "", -1),  # 204 gon
    (218, "", -1),  # 205 gra
    (219, "", -1),  # 206 gre
    (220, "", -1),  # 207 gri
    (221, "", -1),  # 208 gro
    (153, "", -1),  # 209 gus
    (154, "", -1),  # 210 lam
    (155, "", -1),  # 211 len
    (156, "", -1),  # 212 lin
    (157, "", -1),  # 213 lor
    (158, "", -1),  # 214 lum
    (159, "", -1),  # 215 mal
    (160, "t", 284),  # 216 men
    (69, "", -1),  # 217 mil
    (95, "", -1),  # 218 mor
    (118, "", -1),  # 219 mul
    (164, "", -1),  # 220 nam
    (165, "", -1),  # 221 nel
    (166, "", -1),  # 222 nim
    (167, "", -1),  # 223 nor
    (168, "", -1),  # 224 num
    (128, "", -1),  # 225 ous
    (169, "", -1),  # 226 pan
    (170, "", -1),  # 227 per
    (242, "", -1),  # 228 pha
    (243, "", -1),  # 229 phe
    (244, "", -1),  # 230 phi
    (245, "", -1),  # 231 pho
    (171, "", -1),  # 232 pil
    (222, "", -1),  # 233 pla
    (223, "", -1),  # 234 ple
    (224, "", -1),  # 235 pli
    (225, "", -1),  # 236 plo
    (172, "", -1),  # 237 pol
    (226, "", -1),  # 238 pra
    (227, "", -1),  # 239 pre
    (228, "", -1),  # 240 pri
    (229, "", -1),  # 241 pro
    (173, "", -1),  # 242 pus
    (238, "", -1),  # 243 qua
    (239, "", -1),  # 244 que
    (240, "", -1),  # 245 qui
    (241, "", -1),  # 246 quo
    (174, "", -1),  # 247 ram
    (175, "", -1),  # 248 ren
    (176, "", -1),  # 249 ril
    (177, "", -1),  # 250 ron
    (178, "", -1),  # 251 rum
    (179, "", -1),  # 252 sal
    (180, "", -1),  # 253 sen
    (181, "", -1),  # 254 sil
    (-1, "n", 285),  # 255 sio
    (-1, "e", 286),  # 256 siv
    (182, "", -1),  # 257 sol
    (252, "", -1),  # 258 son
    (230, "", -1),  # 259 sta
    (231, "", -1),  # 260 ste
    (232, "", -1),  # 261 sti
    (233, "", -1),  # 262 sto
    (183, "", -1),  # 263 sum
    (184, "", -1),  # 264 tal
    (185, "", -1),  # 265 ten
    (246, "", -1),  # 266 tha
    (247, "", -1),  # 267 the
    (248, "", -1),  # 268 thi
    (249, "", -1),  # 269 tho
    (186, "", -1),  # 270 til
    (-1, "n", 287),  # 271 tio
    (-1, "e", 288),  # 272 tiv
    (187, "", -1),  # 273 tor
    (234, "", -1),  # 274 tra
    (235, "", -1),  # 275 tre
    (112, "", -1),  # 276 tri
    (237, "", -1),  # 277 tro
    (188, "", -1),  # 278 tum
    (189, "", -1),  # 279 val
    (190, "", -1),  # 280 ven
    (191, "", -1),  # 281 vil
    (192, "", -1),  # 282 vor
    (193, "", -1),  # 283 vus
    (253, "", -1),  # 284 ment
    (255, "", -1),  # 285 sion
    (250, "", -1),  # 286 sive
    (254, "", -1),  # 287 tion
    (251, "", -1),  # 288 tive
)
# fmt: on
