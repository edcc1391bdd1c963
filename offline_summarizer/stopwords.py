"""Bundled stop-word lists for the main European languages, and abbreviation lists.

Words are stored lower-case; `languages.py` case-folds them when a profile is built.
"""
from __future__ import annotations

from typing import Dict, FrozenSet


ENGLISH = frozenset({
    "a","about","above","after","again","against","all","am","an","and","any","are","as","at","be","because","been",
    "before","being","below","between","both","but","by","can","could","did","do","does","doing","down","during","each",
    "few","for","from","further","had","has","have","having","he","her","here","hers","herself","him","himself","his",
    "how","i","if","in","into","is","it","it's","its","itself","just","me","more","most","my","myself","no","nor","not",
    "now","of","off","on","once","only","or","other","our","ours","ourselves","out","over","own","same","she","should",
    "so","some","such","than","that","the","their","theirs","them","themselves","then","there","these","they","this",
    "those","through","to","too","under","until","up","very","was","we","were","what","when","where","which","while",
    "who","whom","why","will","with","would","you","your","yours","yourself","yourselves","don't","isn't","wasn't",
    "i'm","you're","he's","she's","we're","they're","i've","we've","i'd","i'll","also","however","may","might","must",
    "shall","upon","yet",
})

FRENCH = frozenset({
    "au","aux","avec","ce","ces","dans","de","des","du","elle","elles","en","et","eux","il","ils","je","la","le","les",
    "leur","leurs","lui","ma","mais","me","même","mes","moi","mon","ne","nos","notre","nous","on","ou","où","par","pas",
    "pour","qu","que","qui","sa","se","ses","son","sur","ta","te","tes","toi","ton","tu","un","une","vos","votre","vous",
    "c","d","j","l","m","n","s","t","y","à","été","être","est","sont","était","étaient","ai","as","avons","avez","ont",
    "avait","cette","cet","comme","donc","si","sans","sous","plus","tout","tous","toute","toutes","aussi","très","entre",
    "ni","car","dont","ceci","cela","ça","lorsque","quand","puis",
})

GERMAN = frozenset({
    "aber","alle","allem","allen","aller","alles","als","also","am","an","ander","andere","anderen","auch","auf","aus",
    "bei","bin","bis","bist","da","damit","dann","das","dass","daß","dein","deine","dem","den","denn","der","des","dich",
    "die","dies","diese","diesem","diesen","dieser","dieses","dir","doch","dort","du","durch","ein","eine","einem",
    "einen","einer","eines","er","es","etwas","euch","euer","für","gegen","hab","habe","haben","hat","hatte","hier",
    "hin","ich","ihm","ihn","ihnen","ihr","ihre","im","in","ist","ja","jede","jedem","jeden","jeder","jetzt","kann",
    "kein","keine","man","mein","meine","mich","mir","mit","muss","nach","nicht","nichts","noch","nun","nur","ob",
    "oder","ohne","sehr","sein","seine","sich","sie","sind","so","solche","soll","sondern","um","und","uns","unser",
    "unter","viel","vom","von","vor","war","waren","warum","was","weil","wenn","wer","werden","wie","wieder","will",
    "wir","wird","wo","zu","zum","zur","zwar","zwischen","über",
})

SPANISH = frozenset({
    "a","al","algo","algunos","ante","antes","como","con","contra","cual","cuando","de","del","desde","donde","durante",
    "e","el","ella","ellas","ellos","en","entre","era","es","esa","esas","ese","eso","esos","esta","estaba","estado",
    "estas","este","esto","estos","está","están","fue","fueron","ha","han","hasta","hay","la","las","le","les","lo",
    "los","me","mi","mis","muy","más","nada","ni","no","nos","nosotros","o","os","otra","otros","para","pero","poco",
    "por","porque","que","quien","se","sea","ser","si","sin","sobre","son","su","sus","sí","también","tanto","te",
    "tiene","todo","todos","tu","tus","un","una","uno","unos","y","ya","yo","él","qué","cómo",
})

ITALIAN = frozenset({
    "a","ad","al","alla","alle","agli","ai","anche","avere","c","che","chi","ci","come","con","contro","cui","da","dal",
    "dalla","dai","dagli","dei","degli","del","della","delle","dello","di","dove","e","è","ed","era","erano","essere",
    "gli","ha","hanno","ho","i","il","in","io","l","la","le","lei","lo","loro","lui","ma","mi","mio","ne","nei","nel",
    "nella","nelle","no","noi","non","o","per","perché","più","quale","quando","quella","quello","questa","questo","se",
    "sei","si","sia","siamo","sono","sta","su","sua","sue","sul","sulla","suo","tra","tu","tutti","tutto","un","una",
    "uno","vi","voi",
})

PORTUGUESE = frozenset({
    "a","ao","aos","as","até","com","como","da","das","de","dela","dele","deles","depois","do","dos","e","ela","elas",
    "ele","eles","em","entre","era","essa","esse","esta","este","eu","foi","foram","há","isso","isto","já","lhe","mais",
    "mas","me","mesmo","meu","minha","muito","na","nas","nem","no","nos","nós","num","numa","o","os","ou","para","pela",
    "pelo","por","qual","quando","que","quem","se","sem","ser","seu","seus","sua","suas","são","também","te","tem",
    "um","uma","você","à","às","é","está","estão",
})

DUTCH = frozenset({
    "aan","al","alles","als","altijd","andere","ben","bij","daar","dan","dat","de","der","deze","die","dit","doch","doen",
    "door","dus","een","eens","en","er","ge","geen","geweest","haar","had","heb","hebben","heeft","hem","het","hier",
    "hij","hoe","hun","iemand","iets","ik","in","is","ja","je","kan","kon","kunnen","maar","me","meer","men","met","mij",
    "mijn","moet","na","naar","niet","niets","nog","nu","of","om","omdat","onder","ons","ook","op","over","reeds","te",
    "tegen","toch","toen","tot","u","uit","uw","van","veel","voor","want","waren","was","wat","werd","wezen","wie",
    "wil","worden","wordt","zal","ze","zelf","zich","zij","zijn","zo","zonder","zou",
})

RUSSIAN = frozenset({
    "и","в","во","не","что","он","на","я","с","со","как","а","то","все","она","так","его","но","да","ты","к","у","же",
    "вы","за","бы","по","только","ее","её","мне","было","вот","от","меня","еще","ещё","нет","о","из","ему","теперь",
    "когда","даже","ну","вдруг","ли","если","уже","или","ни","быть","был","него","до","вас","нибудь","опять","уж",
    "вам","ведь","там","потом","себя","ничего","ей","может","они","тут","где","есть","надо","ней","для","мы","тебя",
    "их","чем","была","сам","чтоб","без","будто","чего","раз","тоже","себе","под","будет","ж","тогда","кто","этот",
    "того","потому","этого","какой","совсем","ним","здесь","этом","один","почти","мой","тем","чтобы","нее","были",
    "это","эти","при","об","также",
})

GREEK = frozenset({
    "ο","η","το","οι","τα","του","της","των","τον","την","τη","τις","τους","ένα","ένας","μια","μία","και","κι","να",
    "θα","δεν","μη","μην","σε","στο","στη","στην","στον","στα","στις","στους","με","για","από","που","πως","ότι","αν",
    "ή","αλλά","όμως","ως","είναι","ήταν","έχει","είχε","αυτό","αυτή","αυτός","αυτά","αυτοί","εγώ","εσύ","εμείς",
    "εσείς","μου","σου","μας","σας","τους","πιο","πολύ","όπως","όταν","εδώ","εκεί","κάθε","μόνο","ακόμα","ακόμη",
})


# Abbreviations that are always followed by more of the same sentence:
# titles, "e.g."-style connectives and reference prefixes ("p.", "Nr.").
NON_FINAL_ABBREVIATIONS: Dict[str, FrozenSet[str]] = {
    "english": frozenset({
        "mr","mrs","ms","dr","prof","mt","vs","e.g","i.e","cf","fig","figs","vol","vols","pp","approx","gen","col",
        "capt","lt","sgt","rev","hon",
    }),
    "french": frozenset({
        "m","mm","mme","mmes","mlle","mlles","dr","pr","me","cf","p","pp","vol","n°","av","c.-à-d","fig",
    }),
    "german": frozenset({
        "hr","hrn","fr","frl","dr","prof","nr","bzw","ca","u.a","z.b","d.h","vgl","evtl","ggf","inkl","geb","bd","s",
        "abb","dipl","ing","st",
    }),
    "spanish": frozenset({
        "sr","sra","srta","sres","dr","dra","lic","ing","prof","ud","uds","vd","vds","pág","págs","núm","vol","ej",
        "p.ej","aprox","av","avda","gral",
    }),
    "italian": frozenset({
        "sig","sigg","sig.ra","dott","dott.ssa","prof","prof.ssa","ing","avv","arch","geom","rag","on","egr","gent",
        "pag","pagg","vol","n","nr","es","fig","cap","art",
    }),
    "portuguese": frozenset({
        "sr","sra","srs","sras","dr","dra","prof","profa","eng","exmo","exma","v.exa","pág","págs","núm","vol","ex",
        "cf","fig","av","apto",
    }),
    "dutch": frozenset({
        "dhr","mevr","mw","dr","drs","ir","ing","mr","prof","bijv","bv","d.w.z","o.a","m.b.t","ca","nr","blz","vgl",
        "zgn","resp","st",
    }),
    "russian": frozenset({
        "т.е","т.к","пр","см","ср","ул","д","кв","стр","рис","табл","акад","проф","доц","им","напр",
    }),
    "greek": frozenset({
        "κ","κα","δρ","καθ","π.χ","δηλ","σελ","αρ","βλ","οδ",
    }),
    "polish": frozenset({"np","tzn","tj","dr","prof","ul","godz","str","nr"}),
    "swedish": frozenset({"t.ex","bl.a","d.v.s","dvs","s.k","ca","nr"}),
    "danish": frozenset({"f.eks","bl.a","ca","nr","dvs"}),
    "norwegian": frozenset({"f.eks","bl.a","ca","nr","dvs"}),
    "czech": frozenset({"např","tzv","tj","str","č"}),
    "finnish": frozenset({"esim","ks","n"}),
    "ukrainian": frozenset({"напр","див","вул","ст"}),
    "turkish": frozenset({"dr","prof","no"}),
    "hungarian": frozenset({"dr","pl","ld"}),
    "romanian": frozenset({"dl","dna","dr","prof","nr"}),
    "catalan": frozenset({"sr","sra","dr","pàg"}),
}

# Abbreviations that may also close a sentence ("... and so on, etc. Then ...").
# After one of these a period ends the sentence only when an upper-case letter follows.
ABBREVIATIONS: Dict[str, FrozenSet[str]] = {
    "english": frozenset({
        "sr","jr","st","al","ed","eds","dept","est","inc","ltd","co","corp","etc","no","nos","jan","feb","mar","apr",
        "jun","jul","aug","sep","sept","oct","nov","dec","u.s","u.k","a.m","p.m",
    }),
    "french": frozenset({"st","ste","etc","env","apr","j.-c","éd"}),
    "german": frozenset({"usw","jh","jhd","mio","mrd","gmbh","str","etc"}),
    "spanish": frozenset({"etc","dto","cía","s.a"}),
    "italian": frozenset({"ecc","s.p.a","etc"}),
    "portuguese": frozenset({"etc","ltda","cia","s.a"}),
    "dutch": frozenset({"enz","etc","jl"}),
    "russian": frozenset({"г","гг","т.д","т.п","др","руб","коп","тыс","млн","млрд"}),
    "greek": frozenset({"κλπ","κ.λπ","κ.ά","μ.χ","π.μ","μ.μ"}),
    "polish": frozenset({"itd","itp","r"}),
    "swedish": frozenset({"osv","m.m","etc"}),
    "danish": frozenset({"osv","mv","etc"}),
    "norwegian": frozenset({"osv","mv","etc"}),
    "czech": frozenset({"atd","apod"}),
    "finnish": frozenset({"jne","ym"}),
    "ukrainian": frozenset({"т.д","т.п"}),
    "turkish": frozenset({"vb","vs"}),
    "hungarian": frozenset({"stb"}),
    "romanian": frozenset({"etc"}),
    "catalan": frozenset({"etc"}),
}


# Curated lists; other languages take theirs from stopwordsiso (see languages.py).
STOP_WORDS: Dict[str, FrozenSet[str]] = {
    "english": ENGLISH,
    "french": FRENCH,
    "german": GERMAN,
    "spanish": SPANISH,
    "italian": ITALIAN,
    "portuguese": PORTUGUESE,
    "dutch": DUTCH,
    "russian": RUSSIAN,
    "greek": GREEK,
}
